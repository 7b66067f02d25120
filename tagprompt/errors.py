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

"""Exceptions raised by tagprompt."""

from __future__ import annotations


class TagPromptError(Exception):
    """Base class for tagprompt errors."""


class MissingPlaceholderError(TagPromptError):
    """Inputs were passed to ``build()`` but ``inputs()`` was never called.

    This is a usage error: there is no placeholder in the document to
    receive the rendered values.
    """
