from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    JSON = "JSON"
    XML = "XML"
    # JSON on the wire, decoded into a dict / attribute object client-side
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"
    LINE = "LINE"
    CONSOLE = "CONSOLE"
    VAR = "VAR"

    @property
    def wire_value(self) -> str:
        if self in (OutputFormat.ARRAY, OutputFormat.OBJECT):
            return OutputFormat.JSON.value
        return self.value

    @property
    def is_structured(self) -> bool:
        return self in (OutputFormat.JSON, OutputFormat.XML, OutputFormat.ARRAY, OutputFormat.OBJECT)

    @classmethod
    def parse(cls, value: OutputFormat | str) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        s = str(value).strip().upper()
        if s == "PHP":
            return cls.ARRAY
        return cls(s)


class Action(str, Enum):
    COMPETITIONS = "competitions"
    STANDINGS = "standings"
    TODAY = "today"
    FIXTURES = "fixtures"
    COMMENTARIES = "commentaries"
