from datetime import date

import click
from rich import pretty
from rich.console import Console

from xrmgen.api.builders import resolve_registry_actions
from xrmgen.api.gen_logging import configure_gen_logging
from xrmgen.api.generator import GenerationOptions, run_codegen
from xrmgen.api.sources import MetadataSnapshot
from xrmgen.language import build_filter
from xrmgen.lib.registry import ModelRegistry
from xrmgen.utils import print_filter_debug

pretty.install()
console = Console()


def _today():
    return date.today().strftime('%Y-%m-%d')


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every filter decision.")
@click.option("-q", "--quiet", is_flag=True, help="Log warnings and errors only.")
@click.pass_context
def cli(context, verbose, quiet):
    context.ensure_object(dict)
    configure_gen_logging(verbose=verbose, quiet=quiet)


@cli.command("validate", help="Filter definition validation")
@click.pass_context
@click.option("--filter", "filter_path", default="filter.xml", show_default=True, help="Filter definition file.")
def validate(context, filter_path):
    try:
        build_filter(filter_path)
        console.print(f"[{_today()}] Filter validation success!", style='green')
    except Exception as e:
        console.print(f"[{_today()}] Validation failed with error(s): {e}", style='red')
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Parse and print a summary of the filter (entities, optionsets, actions).")
@click.pass_context
@click.option("--filter", "filter_path", default="filter.xml", show_default=True, help="Filter definition file.")
@click.option("--metadata", "metadata_path", default=None, help="Metadata snapshot used to resolve actions.")
def inspect_cmd(context, filter_path, metadata_path):
    try:
        registry = ModelRegistry()
        definition = build_filter(filter_path, registry)
        if metadata_path:
            resolve_registry_actions(registry, MetadataSnapshot.from_file(metadata_path))
        console.print(f"[{_today()}] Filter validation success!", style='green')
        print_filter_debug(definition, registry if metadata_path else None)
    except Exception as e:
        console.print(f"[{_today()}] Inspect failed with error(s): {e}", style='red')
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Emit the unit-of-work module for a filter definition.")
@click.pass_context
@click.option("--filter", "filter_path", default="filter.xml", show_default=True, help="Filter definition file.")
@click.option("--metadata", "metadata_path", required=True, help="Metadata snapshot (YAML/JSON).")
@click.option("--namespace", required=True, help="Namespace of the generated entities.")
@click.option("--action-namespace", default=None,
              help="Namespace of the action contracts (default: namespace with every Entities replaced by Actions).")
@click.option("--service-context-name", required=True, help="Class name of the generated service context.")
@click.option("--out", "out_path", default="crm_unit_of_work.py", show_default=True, help="Output module.")
def generate(context, filter_path, metadata_path, namespace, action_namespace, service_context_name, out_path):
    try:
        options = GenerationOptions(
            namespace=namespace,
            service_context_name=service_context_name,
            action_namespace=action_namespace,
        )
        written = run_codegen(filter_path, MetadataSnapshot.from_file(metadata_path), options, out_path)
        console.print(f"[{_today()}] Unit of work emitted to: {written.resolve()}", style="green")
    except Exception as e:
        console.print(f"[{_today()}] Generate failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


def main():
    cli(prog_name="xrmgen")
