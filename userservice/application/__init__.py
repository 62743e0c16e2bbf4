# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .result import Failure, Outcome, OutcomeKind

__all__ = ["Failure", "Outcome", "OutcomeKind"]
