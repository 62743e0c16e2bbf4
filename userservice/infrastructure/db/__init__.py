# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    Base,
    build_engine,
    build_session_factory,
    check_database,
    init_db,
    session_scope,
)

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "check_database",
    "init_db",
    "session_scope",
]
