"""Query predicates and the query grammar they serialize to.

    [:d = at(document.type, "article")any(document.tags, [ "a", "b" ])]

Values are wrapped in double quotes verbatim. Quotes inside a value are not
escaped, so callers must keep them out of predicate values.
"""

from pydantic import BaseModel, ConfigDict


class At(BaseModel):
    model_config = ConfigDict(frozen=True)

    fragment: str
    value: str

    def serialize(self) -> str:
        return f'at({self.fragment}, "{self.value}")'


class AtIn(BaseModel):
    model_config = ConfigDict(frozen=True)

    fragment: str
    values: list[str]

    def serialize(self) -> str:
        return f"at({self.fragment}, {_quote_list(self.values)})"


class AnyIn(BaseModel):
    model_config = ConfigDict(frozen=True)

    fragment: str
    values: list[str]

    def serialize(self) -> str:
        return f"any({self.fragment}, {_quote_list(self.values)})"


class FullText(BaseModel):
    model_config = ConfigDict(frozen=True)

    fragment: str
    value: str

    def serialize(self) -> str:
        return f'fulltext({self.fragment}, "{self.value}")'


Predicate = At | AtIn | AnyIn | FullText


def at(fragment: str, value: str) -> At:
    return At(fragment=fragment, value=value)


def at_in(fragment: str, values: list[str]) -> AtIn:
    return AtIn(fragment=fragment, values=values)


def any_in(fragment: str, values: list[str]) -> AnyIn:
    return AnyIn(fragment=fragment, values=values)


def fulltext(fragment: str, value: str) -> FullText:
    return FullText(fragment=fragment, value=value)


def to_query(predicates: list[Predicate]) -> str:
    """Serialize predicates into the ``q`` parameter. No predicates, no query."""
    if not predicates:
        return ""
    return "[:d = " + "".join(p.serialize() for p in predicates) + "]"


def _quote_list(values: list[str]) -> str:
    return "[ " + ", ".join(f'"{v}"' for v in values) + " ]"
