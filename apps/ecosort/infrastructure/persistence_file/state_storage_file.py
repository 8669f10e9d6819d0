"""File State Storage - StateStoragePort 구현체.

키마다 JSON 파일 하나 (디렉터리 기반 로컬 영속 저장소).
쓰기는 임시 파일 + os.replace로 원자적 교체.
파일 I/O는 워커 스레드에서 수행 (anyio.to_thread).
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

import anyio.to_thread

from ecosort.application.common.ports.state_storage import StateStoragePort
from ecosort.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileStateStorage(StateStoragePort):
    """파일 시스템 기반 상태 저장소."""

    def __init__(self, base_dir: str | Path):
        """초기화.

        Args:
            base_dir: 저장 디렉터리 (없으면 첫 쓰기 시 생성)
        """
        self._base_dir = Path(base_dir)
        logger.info("FileStateStorage initialized (path=%s)", self._base_dir)

    def _path_for(self, key: str) -> Path:
        # "ecosort:history" → ecosort_history.json
        return self._base_dir / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    # ─────────────────────────────────────────────────────────────
    # Blocking I/O (워커 스레드 전용)
    # ─────────────────────────────────────────────────────────────

    def _read(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(key, str(e)) from e

    def _write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._base_dir, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(key, str(e)) from e

        logger.debug("state_saved", extra={"key": key, "path": str(path)})

    def _remove(self, key: str) -> None:
        try:
            self._path_for(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(key, str(e)) from e

    # ─────────────────────────────────────────────────────────────
    # StateStoragePort
    # ─────────────────────────────────────────────────────────────

    async def get(self, key: str) -> str | None:
        return await anyio.to_thread.run_sync(self._read, key)

    async def set(self, key: str, value: str) -> None:
        await anyio.to_thread.run_sync(self._write, key, value)

    async def delete(self, key: str) -> None:
        await anyio.to_thread.run_sync(self._remove, key)

    async def aclose(self) -> None:
        # 열린 핸들 없음
        pass
