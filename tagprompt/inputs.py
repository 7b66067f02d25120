# tagprompt — structured prompt assembly
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Filtering and serialisation of input values.

Each surviving entry of an input mapping is rendered on its own line as
``<key>value</key>``:

- ``None``, ``""``, empty lists/tuples and empty mappings are dropped
- lists, tuples and mappings become compact JSON (``[1,2,3]``)
- everything else is coerced with ``str()``, except booleans and
  integral floats, which are spelled ``true``/``false`` and ``30``
- inside lists and mappings, integral floats follow the same rule and
  NaN or infinite floats become ``null``
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from tagprompt.settings import BuilderSettings

logger = logging.getLogger(__name__)

JSON_SEPARATORS = (",", ":")

# Above this magnitude floats print in exponent form (``1e+21``)
MAX_PLAIN_FLOAT = 1e21


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_plain_integral(value: float) -> bool:
    return value.is_integer() and abs(value) < MAX_PLAIN_FLOAT


def _to_json_ready(value: Any) -> Any:
    """Apply the scalar float rules to every float nested in *value*.

    Non-finite floats become ``None`` (JSON ``null``) and integral
    floats become ``int``.
    """
    if isinstance(value, Mapping):
        return {key: _to_json_ready(item) for key, item in value.items()}
    if _is_array(value):
        return [_to_json_ready(item) for item in value]
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if _is_plain_integral(value):
            return int(value)
    return value


def is_empty_value(value: Any) -> bool:
    """Return True if *value* should be left out of the rendered inputs."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Mapping) or _is_array(value):
        return len(value) == 0
    return False


def serialize_value(value: Any, settings: BuilderSettings | None = None) -> str:
    """Convert a single input value to the text placed inside its tag."""
    if isinstance(value, Mapping) or _is_array(value):
        ensure_ascii = settings.ensure_ascii if settings else False
        return json.dumps(
            _to_json_ready(value),
            separators=JSON_SEPARATORS,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            default=str,
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if _is_plain_integral(value):
            return str(int(value))
    return str(value)


def render_inputs(
    params: Mapping[str, Any], settings: BuilderSettings | None = None,
) -> str:
    """Render *params* as ``<key>value</key>`` lines, skipping empty values.

    Entries keep the mapping's iteration order.  Returns ``""`` when
    every entry was filtered out.
    """
    separator = settings.separator if settings else "\n"
    lines: list[str] = []
    dropped: list[str] = []
    for key, value in params.items():
        if is_empty_value(value):
            dropped.append(str(key))
            continue
        lines.append(f"<{key}>{serialize_value(value, settings)}</{key}>")

    if dropped:
        logger.debug("Skipped empty inputs: %s", ", ".join(dropped))
    return separator.join(lines)
