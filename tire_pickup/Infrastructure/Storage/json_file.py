import asyncio
import json
import os
from typing import Any

import aiofiles
from loguru import logger


class JsonFile:
    """
    A whole-document JSON file, rewritten on every save.

    Callers that read, mutate and write back must hold `lock` for the whole
    cycle; one JsonFile instance per path is shared process-wide.
    """

    def __init__(self, path: str):
        self.path = path
        self.lock = asyncio.Lock()

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def _ensure_dir(self):
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)

    async def read(self, default: Any = None) -> Any:
        if not self.exists():
            return default
        try:
            async with aiofiles.open(self.path, "r") as f:
                return json.loads(await f.read())
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}, using fallback: {e}")
            return default

    async def write(self, data: Any) -> None:
        self._ensure_dir()
        async with aiofiles.open(self.path, "w") as f:
            await f.write(json.dumps(data, indent=2))
