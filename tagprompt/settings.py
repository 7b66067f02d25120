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

"""Builder settings and fixed placeholder constants."""

from __future__ import annotations

from dataclasses import dataclass

INPUTS_TAG = "inputs"
INPUTS_MARKER = "{{INPUTS}}"
INPUTS_PLACEHOLDER = f"<{INPUTS_TAG}>{INPUTS_MARKER}</{INPUTS_TAG}>"


@dataclass
class BuilderSettings:
    """Caller-supplied options for :class:`~tagprompt.PromptBuilder`."""
    separator: str = "\n"        # Between fragments and between input lines
    ensure_ascii: bool = False   # Passed to json.dumps for list/dict inputs
