"""Data models for a repository's API descriptor."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RefProperties(BaseModel):
    """A content release the API can be queried against."""

    model_config = ConfigDict(frozen=True)

    id: str
    ref: str  # opaque token sent as the ``ref`` URL parameter
    label: str
    is_master: bool = False


class FormField(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str  # String / Integer
    multiple: bool = False
    default: str | None = None


class Form(BaseModel):
    """A search form: where and how to submit a query."""

    model_config = ConfigDict(frozen=True)

    method: str
    action: str
    fields: dict[str, FormField]
    enctype: str
    rel: str | None = None
    name: str | None = None


class Experiments(BaseModel):
    model_config = ConfigDict(frozen=True)

    draft: list[str] = []
    running: list[str] = []
    raw: dict[str, Any] = {}


class ApiDescriptor(BaseModel):
    """Everything the repository's API entry point describes."""

    model_config = ConfigDict(frozen=True)

    refs: list[RefProperties]
    bookmarks: dict[str, str]
    types: dict[str, str]
    tags: list[str]
    version: str
    forms: dict[str, Form]
    oauth_initiate: str
    oauth_token: str
    license: str
    experiments: Experiments

    def get_ref(self, ref_id: str) -> RefProperties | None:
        for ref in self.refs:
            if ref.id == ref_id:
                return ref
        return None

    def get_form(self, form_id: str) -> Form | None:
        return self.forms.get(form_id)

    def master_ref(self) -> RefProperties | None:
        """The ref flagged ``isMasterRef``, if the descriptor has one."""
        for ref in self.refs:
            if ref.is_master:
                return ref
        return None
