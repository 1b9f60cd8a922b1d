import json
import logging
from pathlib import Path

import click

from .config import AliasStrategy, MergeConfig
from .merger import AtomicWriter, PythonSnippetMerger, SnippetMergeError, apply_edits
from .merger.atomic_writer import validate_python_code
from .templates import SnippetRenderer, is_template_path


def parse_variables(values):
    variables = {}
    for value in values:
        name, sep, content = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{value}'", param_hint="--var")
        variables[name] = content
    return variables


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--var", "-D", "variables", multiple=True, help="Template variable as NAME=VALUE (repeatable)")
@click.option(
    "--on-alias",
    default=None,
    type=click.Choice([s.value for s in AliasStrategy]),
    help="What to do when the snippet uses aliased imports (overrides config)",
)
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
@click.option("--in-place", "-i", is_flag=True, default=False, help="Write the result back to BUFFER")
@click.option("--edits", "show_edits", is_flag=True, default=False, help="Print the edits as JSON instead of the merged text")
@click.option("--no-validate", is_flag=True, default=False, help="Do not check that the merged file parses")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("buffer", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("snippet", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def snippet_merge(config, variables, on_alias, output, in_place, show_edits, no_validate, verbose, buffer, snippet):
    """Merge the Python code in SNIPPET into BUFFER."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if output is not None and in_place:
        raise click.UsageError("--output and --in-place are mutually exclusive")

    if config is not None:
        with open(config) as f:
            config = MergeConfig.from_dict(json.load(f))
    else:
        config = MergeConfig()

    if on_alias is not None:
        config.alias_strategy = AliasStrategy(on_alias)

    template_variables = {**config.template_variables, **parse_variables(variables)}

    buffer_text = Path(buffer).read_text(encoding="utf-8")
    snippet_text = Path(snippet).read_text(encoding="utf-8")

    merger = PythonSnippetMerger()
    try:
        if variables or is_template_path(snippet):
            snippet_text = SnippetRenderer().render(snippet_text, template_variables)

        result = merger.merge_snippet(buffer_text, snippet_text)
        if result.ok:
            edits = result.edits
        elif config.alias_strategy == AliasStrategy.INSERT_RAW:
            click.echo(f"Warning: {result.error}; inserting snippet unmerged", err=True)
            edits = merger.calculate_raw_changes(buffer_text, snippet_text)
        else:
            raise result.error

        if show_edits:
            click.echo(json.dumps([e.to_dict() for e in edits], indent=2))
            return

        merged = apply_edits(buffer_text, edits)
        target = Path(buffer) if in_place else Path(output) if output is not None else None
        validate = config.output.validate_before_write and not no_validate
        if target is None:
            click.echo(merged, nl=False)
        elif config.output.atomic_write:
            AtomicWriter().write(target, merged, validate=validate)
        else:
            if validate:
                validate_python_code(merged)
            target.write_text(merged, encoding="utf-8")
    except SnippetMergeError as e:
        raise click.ClickException(str(e)) from e


def main():
    snippet_merge()


if __name__ == "__main__":
    main()
