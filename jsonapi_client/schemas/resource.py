"""Pydantic schemas for JSON:API documents exchanged with a server."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """Relationship object: linkage plus optional meta and links."""

    data: Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier], None] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None


class JSONAPIResource(BaseModel):
    """Resource object sent to create (no id) or update a resource."""

    type: str
    id: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None


class JSONAPIDocument(BaseModel):
    """Top-level request document."""

    data: Optional[JSONAPIResource] = None
    meta: Optional[Dict[str, Any]] = None


class ErrorObject(BaseModel):
    """JSON:API error object; every member is optional."""

    id: Optional[str] = None
    status: Optional[Union[str, int]] = None
    code: Optional[Union[str, int]] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[ErrorObject]
