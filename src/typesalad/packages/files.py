"""SaladFiles package: typed, asynchronous text and JSON file access.

Usage:
    await system.use_builtin("SaladFiles")
    files = system.files

    await files.write_text(SaladString("notes.txt"), SaladString("hello"))
    text = await files.read_text(SaladString("notes.txt"))      # SaladString("hello")

    data = await files.read_json(SaladString("config.json"))    # SaladObject / SaladArray
    await files.write_json(SaladString("out.json"), data)

JSON conversion wraps strings as SaladString and recurses into arrays and
objects. Numbers, booleans and null stay untyped unless
``FilesSettings.type_scalars`` is enabled.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from typesalad.config import FilesSettings
from typesalad.core.errors import TypeMismatchError
from typesalad.core.types import TypeTag
from typesalad.core.value import (
    SaladArray,
    SaladBool,
    SaladFloat,
    SaladInt,
    SaladObject,
    SaladString,
    TypeSalad,
    tag_of,
    to_json_value,
)

logger = logging.getLogger(__name__)


def _expect_string(value: Any, operation: str, param: str) -> str:
    if tag_of(value) != TypeTag.STRING:
        raise TypeMismatchError(
            f"[SaladFiles] {operation} expects a SaladString for {param}, got '{tag_of(value)}'."
        )
    return value.raw_value()  # type: ignore[no-any-return]


class SaladFiles:
    """Reads and writes files, taking and returning typed values.

    Blocking file calls run in a worker thread so the event loop stays free.
    """

    def __init__(self, settings: FilesSettings | None = None) -> None:
        self._settings = settings or FilesSettings()

    @property
    def settings(self) -> FilesSettings:
        return self._settings

    async def read_text(self, file_name: SaladString) -> SaladString:
        """Read a whole file as text.

        Raises:
            TypeMismatchError: If ``file_name`` is not a SaladString.
            OSError: If the file cannot be read.
        """
        path = Path(_expect_string(file_name, "read_text", "file_name"))
        content = await asyncio.to_thread(path.read_text, encoding=self._settings.encoding)
        return SaladString(content)

    async def write_text(self, file_name: SaladString, content: SaladString) -> None:
        """Write ``content`` to a file, replacing it.

        Raises:
            TypeMismatchError: If either argument is not a SaladString.
            OSError: If the file cannot be written.
        """
        path = Path(_expect_string(file_name, "write_text", "file_name"))
        text = _expect_string(content, "write_text", "content")
        await asyncio.to_thread(path.write_text, text, encoding=self._settings.encoding)
        logger.info("[SaladFiles] Wrote text file => %s", path)

    async def read_json(self, file_name: SaladString) -> Any:
        """Read a JSON file and convert it to typed values.

        Raises:
            ValueError: If the file is not valid JSON.
        """
        text = await self.read_text(file_name)
        try:
            parsed = json.loads(text.raw_value())
        except json.JSONDecodeError as e:
            raise ValueError(
                f"[SaladFiles] Failed to parse JSON in '{file_name.raw_value()}': {e}"
            ) from e
        return self.convert_to_typed(parsed)

    async def write_json(self, file_name: SaladString, value: Any) -> None:
        """Serialize a typed value (or plain data holding typed values) as JSON."""
        _expect_string(file_name, "write_json", "file_name")
        data = json.dumps(to_json_value(value), indent=self._settings.json_indent)
        await self.write_text(file_name, SaladString(data))

    def convert_to_typed(self, value: Any) -> Any:
        """Convert parsed JSON data to typed values.

        Strings become SaladString, lists become SaladArray, dicts become
        SaladObject (recursively). Other scalars pass through untyped unless
        ``type_scalars`` is set, in which case ints, floats and booleans are
        wrapped too. ``None`` is always passed through.
        """
        if isinstance(value, list):
            return SaladArray(self.convert_to_typed(item) for item in value)
        if isinstance(value, dict):
            return SaladObject({key: self.convert_to_typed(item) for key, item in value.items()})
        if isinstance(value, str):
            return SaladString(value)
        if self._settings.type_scalars:
            return _wrap_scalar(value)
        return value


def _wrap_scalar(value: Any) -> TypeSalad | None:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return SaladBool(value)
    if isinstance(value, int):
        return SaladInt(value)
    if isinstance(value, float):
        return SaladFloat(value)
    return value


class SaladFilesPackage:
    """Package instance the System stores; delegates to a SaladFiles."""

    def __init__(self, settings: FilesSettings | None = None) -> None:
        self._files = SaladFiles(settings)

    async def read_text(self, file_name: SaladString) -> SaladString:
        return await self._files.read_text(file_name)

    async def write_text(self, file_name: SaladString, content: SaladString) -> None:
        await self._files.write_text(file_name, content)

    async def read_json(self, file_name: SaladString) -> Any:
        return await self._files.read_json(file_name)

    async def write_json(self, file_name: SaladString, value: Any) -> None:
        await self._files.write_json(file_name, value)
