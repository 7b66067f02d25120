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

"""Fluent builder for tag-structured prompts.

Fragments are collected in order and joined with newlines by
:meth:`PromptBuilder.build`.  A single ``<inputs>`` placeholder can be
registered with :meth:`PromptBuilder.inputs`; at build time it is
replaced with the rendered input mapping, or removed when no mapping is
given.

Only the first placeholder occurrence is substituted.  Calling
``inputs()`` twice leaves the second ``<inputs>{{INPUTS}}</inputs>`` in
the output verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from tagprompt.errors import MissingPlaceholderError
from tagprompt.inputs import render_inputs
from tagprompt.settings import INPUTS_PLACEHOLDER, BuilderSettings

logger = logging.getLogger(__name__)


class PromptBuilder:
    """Assemble a prompt from text, nested tags, lists and an inputs slot.

    Every structural method mutates the builder and returns it, so calls
    chain::

        prompt = (
            PromptBuilder()
            .tag("system", lambda b: b.text("You are a helpful assistant."))
            .tag("user", lambda b: b.text("Summarise:").inputs())
            .build({"title": "...", "abstract": "..."})
        )

    Args:
        settings: Separator and JSON options.  Defaults to
            :class:`BuilderSettings` with newline separators.
    """

    def __init__(self, settings: BuilderSettings | None = None) -> None:
        self.settings = settings if settings is not None else BuilderSettings()
        self._content: list[str] = []
        self._placeholder: str | None = None

    def __len__(self) -> int:
        return len(self._content)

    def __str__(self) -> str:
        return self.build()

    @property
    def has_inputs(self) -> bool:
        """True once :meth:`inputs` has been called."""
        return self._placeholder is not None

    # --- Structure ---

    def text(self, text: str) -> PromptBuilder:
        self._content.append(text)
        return self

    def tag(
        self, name: str, body: Callable[[PromptBuilder], Any] | None = None,
    ) -> PromptBuilder:
        """Wrap whatever *body* appends in ``<name>`` ... ``</name>``.

        *body* receives this same builder and is called exactly once.
        Exceptions it raises propagate to the caller.
        """
        self._content.append(f"<{name}>")
        if body is not None:
            body(self)
        self._content.append(f"</{name}>")
        return self

    def numbered_list(self, items: Iterable[str]) -> PromptBuilder:
        """Append one ``"1. item"`` line per item."""
        self._content.extend(
            f"{index}. {item}" for index, item in enumerate(items, 1)
        )
        return self

    def inputs(self) -> PromptBuilder:
        """Mark where the mapping passed to :meth:`build` is rendered."""
        if self._placeholder is not None:
            logger.warning(
                "inputs() called more than once; only the first placeholder "
                "will be substituted"
            )
        self._placeholder = INPUTS_PLACEHOLDER
        self._content.append(self._placeholder)
        return self

    # --- Output ---

    def build(self, params: Mapping[str, Any] | None = None) -> str:
        """Join all fragments and resolve the inputs placeholder.

        Raises :class:`MissingPlaceholderError` if *params* is given
        (even an empty mapping) but :meth:`inputs` was never called.
        The builder itself is left unchanged, so it can be built again.
        """
        result = self.settings.separator.join(self._content)

        if params is None:
            if self._placeholder is not None:
                result = result.replace(self._placeholder, "", 1)
            logger.debug("Built prompt from %d fragments", len(self._content))
            return result

        if self._placeholder is None:
            raise MissingPlaceholderError(
                "build() received inputs but no placeholder was registered; "
                "call inputs() first"
            )

        rendered = render_inputs(params, self.settings)
        logger.debug(
            "Built prompt from %d fragments with %d input(s)",
            len(self._content), len(params),
        )
        return result.replace(self._placeholder, rendered, 1)
