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
"""'pybean scan' — build a container from a package and show its wiring."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from pybean.cli.console import console
from pybean.container.container import Container
from pybean.container.exceptions import BeanCreationException
from pybean.container.stereotypes import DEFAULT_ROLE_MARKERS, STEREOTYPES, stereotype_by_name, stereotypes_of
from pybean.core.config import Config
from pybean.logging.structlog_adapter import StructlogAdapter


def _describe_wiring(container: Container, bean_type: type, bean: object) -> str:
    lines: list[str] = []
    for field in container.descriptor_of(bean_type).injection_points:
        value = getattr(bean, field.name, None)
        target = type(value).__qualname__ if value is not None else "[dim]unset[/dim]"
        lines.append(f"{field.name} -> {target}")
    return "\n".join(lines) or "[dim]-[/dim]"


@click.command()
@click.argument("package")
@click.option(
    "--marker",
    "markers",
    multiple=True,
    type=click.Choice(sorted(STEREOTYPES)),
    help="Stereotype that makes a class a bean (repeatable). Defaults to service and repository.",
)
@click.option("--parallel", is_flag=True, help="Construct and wire beans on a thread pool.")
@click.option("--log-level", default="WARNING", show_default=True, help="Root log level.")
def scan_command(package: str, markers: tuple[str, ...], parallel: bool, log_level: str) -> None:
    """Scan PACKAGE for stereotype-tagged classes and print the resulting beans."""
    StructlogAdapter().configure(Config({"pybean": {"logging": {"level": {"root": log_level}}}}))
    role_markers = frozenset(stereotype_by_name(m) for m in markers) if markers else DEFAULT_ROLE_MARKERS

    try:
        container = Container.for_package(package, role_markers=role_markers, parallel=parallel)
    except (BeanCreationException, ImportError) as exc:
        console.print(f"[error]Container build failed:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc

    table = Table(title=f"[pybean]Beans in {package}[/pybean]", border_style="dim", show_lines=True)
    table.add_column("Bean", style="bold")
    table.add_column("Module", style="dim")
    table.add_column("Stereotypes", style="info")
    table.add_column("Wiring")

    for bean_type in container.registry.bean_types:
        bean = container.registry.instance_of(bean_type)
        table.add_row(
            bean_type.__qualname__,
            bean_type.__module__,
            ", ".join(sorted(stereotypes_of(bean_type))),
            _describe_wiring(container, bean_type, bean),
        )

    console.print(table)
    console.print(f"[success]{len(container)} bean(s) ready[/success]")
