"""API descriptor decoder.

Turns the JSON served at a repository's API entry point into an
ApiDescriptor. Missing or malformed required keys fail the whole decode;
unknown keys are ignored.
"""

from typing import Any

from prismic_client.errors import DecodeError
from prismic_client.models.api import ApiDescriptor, Experiments, Form, FormField, RefProperties

from .base import (
    expect_list,
    expect_object,
    get_bool,
    get_object,
    get_optional_str,
    get_str,
    get_str_dict,
    get_str_list,
    require,
)


def decode_api(raw: Any) -> ApiDescriptor:
    """Decode an API descriptor, raising DecodeError on a shape mismatch."""
    doc = expect_object(raw, "api")

    refs = [
        _decode_ref(item, f"api.refs[{i}]")
        for i, item in enumerate(expect_list(require(doc, "refs", "api"), "api.refs"))
    ]
    forms = {
        form_id: _decode_form(form, f"api.forms.{form_id}")
        for form_id, form in get_object(doc, "forms", "api").items()
    }

    return ApiDescriptor(
        refs=refs,
        bookmarks=get_str_dict(doc, "bookmarks", "api"),
        types=get_str_dict(doc, "types", "api"),
        tags=get_str_list(doc, "tags", "api"),
        version=get_str(doc, "version", "api"),
        forms=forms,
        oauth_initiate=get_str(doc, "oauth_initiate", "api"),
        oauth_token=get_str(doc, "oauth_token", "api"),
        license=get_str(doc, "license", "api"),
        experiments=_decode_experiments(get_object(doc, "experiments", "api")),
    )


def _decode_ref(raw: Any, path: str) -> RefProperties:
    ref = expect_object(raw, path)
    return RefProperties(
        id=get_str(ref, "id", path),
        ref=get_str(ref, "ref", path),
        label=get_str(ref, "label", path),
        is_master=get_bool(ref, "isMasterRef", path, default=False),
    )


def _decode_form(raw: Any, path: str) -> Form:
    form = expect_object(raw, path)
    fields = {
        name: _decode_form_field(field, f"{path}.fields.{name}")
        for name, field in get_object(form, "fields", path).items()
    }
    return Form(
        method=get_str(form, "method", path),
        action=get_str(form, "action", path),
        fields=fields,
        enctype=get_str(form, "enctype", path),
        rel=get_optional_str(form, "rel", path),
        name=get_optional_str(form, "name", path),
    )


def _decode_form_field(raw: Any, path: str) -> FormField:
    field = expect_object(raw, path)
    field_type = get_str(field, "type", path)
    if field_type not in ("String", "Integer"):
        raise DecodeError.unknown_tag("form field", field_type, f"{path}.type")
    default = field.get("default")
    # Integer fields may carry a numeric default
    if isinstance(default, int) and not isinstance(default, bool):
        default = str(default)
    elif default is not None and not isinstance(default, str):
        raise DecodeError("a string or null", default, f"{path}.default")
    return FormField(
        type=field_type,
        multiple=get_bool(field, "multiple", path, default=False),
        default=default,
    )


def _decode_experiments(experiments: dict) -> Experiments:
    path = "api.experiments"
    draft = get_str_list(experiments, "draft", path) if "draft" in experiments else []
    running = get_str_list(experiments, "running", path) if "running" in experiments else []
    return Experiments(draft=draft, running=running, raw=experiments)
