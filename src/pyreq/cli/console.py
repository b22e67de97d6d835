# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

PYREQ_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "hook": "bold magenta",
    "dim": "dim",
})

console = Console(theme=PYREQ_THEME, highlight=False)


def print_hook(name: str, detail: str = "") -> None:
    """Print one lifecycle hook firing: '  ▸ http-error  404'."""
    suffix = f"  [dim]{detail}[/dim]" if detail else ""
    console.print(f"  [hook]▸[/hook] {name}{suffix}")
