from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .commands import Command
from .constants import ENCODING, ENCODING_ERRORS, LINE_DELIMITER, PARAM_SEPARATOR, PARAM_SEPARATOR_TEXT
from .errors import ErrorCode, ProtocolError
from .escaping import escape, unescape
from .validator import validate_command, validate_line_length


class Line(BaseModel):
    """One protocol line: a command token and its unescaped parameters."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., description="Upper-case command token such as OK or D")
    raw_parameters: bytes = Field(default=b"", description="Unescaped parameter bytes, possibly empty")

    @field_validator("command", mode="before")
    @classmethod
    def _normalize(cls, value: Union[str, Command]) -> str:
        try:
            return validate_command(value)
        except ProtocolError as exc:
            raise ValueError(exc.message) from exc

    @field_validator("raw_parameters", mode="before")
    @classmethod
    def _encode(cls, value: Union[str, bytes]) -> bytes:
        # str values may carry surrogate-escaped bytes, which pydantic's str type rejects
        if isinstance(value, str):
            return value.encode(ENCODING, ENCODING_ERRORS)
        return value

    @property
    def parameters(self) -> str:
        return self.raw_parameters.decode(ENCODING, ENCODING_ERRORS)

    def as_tuple(self) -> tuple[str, str]:
        return self.command, self.parameters

    @classmethod
    def create(cls, command: Union[str, Command], parameters: Union[str, bytes] = "") -> "Line":
        try:
            return cls(command=command, raw_parameters=parameters)
        except ValidationError as exc:
            fields = {error["loc"][0] for error in exc.errors() if error["loc"]}
            code = ErrorCode.INVALID_COMMAND if "command" in fields else ErrorCode.INVALID_PARAMETERS
            raise ProtocolError(f"Line validation failed: {exc}", code) from exc

    @classmethod
    def parse(cls, text: str) -> "Line":
        """Build a line from its wire text (delimiter already stripped)."""
        command, sep, remainder = text.partition(PARAM_SEPARATOR_TEXT)
        if not sep:
            return cls.create(command)
        return cls.create(command, unescape(remainder))

    def to_wire(self) -> bytes:
        """Encode as ``COMMAND SP ESCAPED LF``; raises LineTooLong before encoding."""
        validate_line_length(self.command, self.raw_parameters)
        return (
            self.command.encode(ENCODING, ENCODING_ERRORS)
            + PARAM_SEPARATOR
            + escape(self.raw_parameters)
            + LINE_DELIMITER
        )


__all__ = ["Line"]
