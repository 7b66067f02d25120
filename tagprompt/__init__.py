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

"""Compose prompts from text, nested tags, numbered lists and inputs.

Usage::

    from tagprompt import PromptBuilder

    prompt = (
        PromptBuilder()
        .tag("system", lambda b: b.text("You are a helpful assistant."))
        .tag("user", lambda b: (
            b.text("Please provide information about:")
             .numbered_list(["The weather", "Current events"])
             .inputs()
        ))
        .build({"location": "New York", "date": "2023-04-14"})
    )
"""

from tagprompt.builder import PromptBuilder
from tagprompt.errors import MissingPlaceholderError, TagPromptError
from tagprompt.inputs import is_empty_value, render_inputs, serialize_value
from tagprompt.settings import INPUTS_PLACEHOLDER, BuilderSettings

__all__ = [
    "PromptBuilder",
    "BuilderSettings",
    "INPUTS_PLACEHOLDER",
    "MissingPlaceholderError",
    "TagPromptError",
    "render_inputs",
    "serialize_value",
    "is_empty_value",
]
