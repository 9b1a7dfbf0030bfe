"""propscan check command - report unused private properties."""

import json
from pathlib import Path

import click

from propscan.analysis.extensions import ExtensionProvider
from propscan.analysis.models import AnalysisScope, Diagnostic
from propscan.analysis.rule import UnusedPrivatePropertyRule
from propscan.config.loader import load_config
from propscan.core.errors import PropScanError
from propscan.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    log_file_path,
    set_run_id,
)
from propscan.facts.loader import ProgramFacts, load_facts

log = get_logger(__name__)


def run_check(
    facts: ProgramFacts, rule: UnusedPrivatePropertyRule
) -> list[tuple[str, Diagnostic]]:
    """Analyze every class of the document, in document order."""
    results: list[tuple[str, Diagnostic]] = []
    for cls in facts.classes:
        scope = AnalysisScope(cls.name, facts.hierarchy)
        results.extend((cls.label, d) for d in rule.process(cls, scope))
    return results


def _with_log_pointer(message: str) -> str:
    if (path := log_file_path()) is None:
        return message
    return f"{message}\n  See log: {path}"


@click.command()
@click.argument("facts_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .propscan/config.yaml in the current directory)",
)
@click.option(
    "--check-uninitialized/--no-check-uninitialized",
    default=None,
    help="Trust the document's uninitialized sets to silence read-only reports",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def check_command(
    ctx: click.Context,
    facts_path: Path,
    config_path: Path | None,
    check_uninitialized: bool | None,
    as_json: bool,
) -> None:
    """Report unused, write-only and read-only private properties.

    FACTS_PATH is a .json/.yaml facts document produced by a front end.
    Exits with status 1 when anything is reported.
    """
    try:
        config = load_config(config_path=config_path)
    except PropScanError as e:
        raise click.ClickException(str(e)) from e

    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)

    analysis = config.analysis
    if check_uninitialized is not None:
        analysis = analysis.model_copy(update={"check_uninitialized_properties": check_uninitialized})

    set_run_id()
    try:
        facts = load_facts(facts_path)
        rule = UnusedPrivatePropertyRule(ExtensionProvider(), analysis, facts.uninitialized_oracle)
        results = run_check(facts, rule)
    except PropScanError as e:
        log.error("check_failed", error=e.error_name, details=e.details)
        raise click.ClickException(_with_log_pointer(str(e))) from e
    finally:
        clear_run_id()

    if as_json:
        click.echo(
            json.dumps(
                [{"class": label, **d.to_dict()} for label, d in results],
                indent=2,
            )
        )
    else:
        for label, diagnostic in results:
            click.echo(f"{label}:{diagnostic.line}: {diagnostic.message}")
        if results:
            noun = "property" if len(results) == 1 else "properties"
            click.echo(f"Found {len(results)} {noun} to review.", err=True)

    if results:
        ctx.exit(1)
