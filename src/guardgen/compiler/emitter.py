# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of compiled validator definitions into one document."""

from __future__ import annotations

from collections.abc import Sequence

from guardgen.targets.base import Target

# ###############
# Public Interface
# ###############


def emit_document(target: Target, definitions: Sequence[str]) -> str:
    """Join the target's prelude and *definitions*, separated by one blank line.

    *definitions* are emitted in the order given. The document has no
    trailing newline.
    """
    chunks: list[str] = []
    prelude = target.prelude()
    if prelude:
        chunks.append(prelude)
    chunks.extend(definitions)
    return "\n\n".join(chunks)
