"""Shader source preprocessing with #include expansion."""

from __future__ import annotations

from dataclasses import dataclass, field

_DIRECTIVE = "#include"


class IncludeNotFoundError(LookupError):
    """An #include names a file missing from the configuration."""

    def __init__(self, filename: str) -> None:
        super().__init__(f'Include file {filename} in not on "includes" list')
        self.filename = filename


@dataclass
class PreprocessorConfig:
    """Named include files available to the preprocessor."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> str:
        for name, content in self.includes:
            if name == filename:
                return content
        raise IncludeNotFoundError(filename)


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every `#include "name"` directive with the named content."""
    result = source
    position = 0
    while (start := result.find(_DIRECTIVE, position)) != -1:
        cursor = start + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ValueError(f"malformed #include directive at offset {start}")
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end == -1:
            raise ValueError(f"unterminated #include filename at offset {start}")
        content = config.lookup(result[name_start:name_end])
        result = result[:start] + content + result[name_end + 1 :]
        position = start + len(content)
    return result