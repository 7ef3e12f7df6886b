"""
Main entry point for nestpath. Accessed by 'nestpath' in the command line.

Every command reads one document (JSON, JSON lines, YAML, CSV/TSV; '-' for
stdin) and prints the result in the configured output format.
"""
from functools import update_wrapper
import json
from pathlib import Path
import click
from pydantic import ValidationError

from nestpath.core.adapters import adapter_registry
from nestpath.core.errors import NestpathError
from nestpath.core.runtime import build_runtime, Runtime
from nestpath.core.settings import Settings
from nestpath.utils import dict_path, keys, sampling, strings, structure
from nestpath.utils.parse import coerce_scalar
from nestpath.utils.select import pluck as pluck_values

SOURCE = click.Path(exists=True, dir_okay=False, allow_dash=True)
FORMATS = ["json", "jsonl", "yaml", "csv", "tsv"]


def pass_runtime(f):
    """
    Decorator to pass a Runtime to Click commands that need it.
    Ensures a Runtime is created and passed as the first argument, and turns
    nestpath errors into clean CLI errors.
    """
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        ctx.ensure_object(dict)
        rt = ctx.obj.get('rt')
        if rt is None:
            opts = ctx.obj.get('global_opts', {})  # user overrides
            rt = build_runtime(**opts)
            ctx.obj['rt'] = rt
        try:
            return f(ctx.obj['rt'], *args, **kwargs)
        except NestpathError as e:
            raise click.ClickException(str(e)) from e
    return update_wrapper(new_func, f)


def _finish(rt: Runtime, source: str, data, write: bool) -> None:
    """Print the document, or write it back over SOURCE."""
    if not write:
        click.echo(rt.dump(data))
        return
    if source == "-":
        raise click.UsageError("--write needs a file SOURCE, not stdin")
    rt.write(source, data)


@click.group()
@click.option('--settings-dir', type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding settings.yaml (default: the user config dir).")
@click.option('-v', '--verbose', is_flag=True, default=False,
              help="Very very detailed logging for debugging purposes.")
@click.option('-f', '--format', 'output_format', type=click.Choice(FORMATS), default=None,
              help="Output format for this call (overrides settings).")
@click.option('--input-format', type=click.Choice(FORMATS), default=None,
              help="Format of SOURCE when the extension does not say (e.g. stdin).")
@click.version_option()
@click.pass_context
def main(ctx, settings_dir, verbose, output_format, input_format):
    """nestpath: read, reshape and rewrite nested documents with dot paths."""
    ctx.ensure_object(dict)
    ctx.obj['global_opts'] = {
        'settings_dir': settings_dir,
        'verbose': verbose,
        'output_format': output_format,
        'input_format': input_format,
    }

# --- Path commands ---

@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("path", required=False, default=None)
@click.option("--default", default=None, help="Printed instead of failing when PATH is missing.")
def get(rt: Runtime, source: str, path: str | None, default: str | None):
    """
    Print the value at PATH (the whole document when PATH is omitted).

    Example: nestpath get config.yaml database.host
    """
    data = rt.load(source)
    missing = object()
    found = dict_path.get(data, path, missing)
    if found is missing:
        if default is None:
            raise click.ClickException(f"Path '{path}' not found in {source}")
        found = coerce_scalar(default)
    click.echo(rt.dump(found))


@main.command("set")
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("path")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Parse VALUE as JSON instead of a plain scalar.")
@click.option("-w", "--write", is_flag=True, default=False,
              help="Write the result back to SOURCE instead of printing it.")
def set_(rt: Runtime, source: str, path: str, value: str, as_json: bool, write: bool):
    """
    Set PATH to VALUE, creating intermediate levels as needed.

    Example: nestpath set config.yaml database.port 5432 -w
    """
    data = rt.load(source)
    try:
        item = json.loads(value) if as_json else coerce_scalar(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="VALUE") from e
    if data is None:
        data = {}
    try:
        data = dict_path.assign(data, path, item)
    except TypeError as e:
        raise click.ClickException(str(e)) from e
    _finish(rt, source, data, write)


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("paths", nargs=-1, required=True)
@click.option("-w", "--write", is_flag=True, default=False,
              help="Write the result back to SOURCE instead of printing it.")
def forget(rt: Runtime, source: str, paths: tuple[str], write: bool):
    """Remove one or more PATHS. Paths that do not exist are ignored."""
    data = rt.load(source)
    data = dict_path.forget(data, list(paths))
    _finish(rt, source, data, write)


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("paths", nargs=-1, required=True)
@click.option("--any", "any_", is_flag=True, default=False,
              help="Succeed when at least one path exists rather than all.")
def has(rt: Runtime, source: str, paths: tuple[str], any_: bool):
    """Print true/false for PATHS existing; the exit code is 1 when false."""
    data = rt.load(source)
    check = dict_path.has_any if any_ else dict_path.has
    found = check(data, list(paths))
    click.echo("true" if found else "false")
    click.get_current_context().exit(0 if found else 1)

# --- Structure commands ---

@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.option("--prefix", default="", help="Prepended to every dotted key.")
def dot(rt: Runtime, source: str, prefix: str):
    """Flatten the document into {"dotted.path": value} pairs."""
    click.echo(rt.dump(structure.dot(rt.load(source), prefix)))


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
def undot(rt: Runtime, source: str):
    """Expand {"dotted.path": value} pairs back into a nested document."""
    click.echo(rt.dump(structure.undot(rt.load(source))))


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.option("--depth", type=click.IntRange(min=1), default=None,
              help="Levels to flatten (default: all).")
def flatten(rt: Runtime, source: str, depth: int | None):
    """Flatten all values into a single list."""
    data = rt.load(source)
    result = structure.flatten(data) if depth is None else structure.flatten(data, depth)
    click.echo(rt.dump(result))


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("value_path")
@click.option("--key", "key_path", default=None, help="Dot path used to key the result.")
def pluck(rt: Runtime, source: str, value_path: str, key_path: str | None):
    """
    Collect VALUE_PATH from every element of a list.

    Example: nestpath pluck users.json address.city --key id
    """
    click.echo(rt.dump(pluck_values(rt.load(source), value_path, key_path)))


@main.command("sort")
@pass_runtime
@click.argument("source", type=SOURCE)
@click.option("--desc", is_flag=True, default=False, help="Sort descending.")
def sort_(rt: Runtime, source: str, desc: bool):
    """Sort mappings by key and lists by value, at every level."""
    click.echo(rt.dump(structure.sort_recursive(rt.load(source), descending=desc)))


@main.command("keys")
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("case", type=click.Choice(list(keys.CASES)))
@click.option("--shallow", is_flag=True, default=False, help="Only rewrite top-level keys.")
def rekey(rt: Runtime, source: str, case: str, shallow: bool):
    """Rewrite every key into CASE (snake, kebab, camel, studly)."""
    click.echo(rt.dump(keys.convert_keys(rt.load(source), case, deep=not shallow)))

# --- Sampling commands ---

@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible order.")
def shuffle(rt: Runtime, source: str, seed: int | None):
    """Print the top-level values in random order."""
    click.echo(rt.dump(sampling.shuffle(rt.load(source), rng=rt.rng(seed))))


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
@click.argument("count", type=click.IntRange(min=0), required=False, default=None)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible sample.")
@click.option("--preserve-keys", is_flag=True, default=False, help="Keep the original keys.")
def sample(rt: Runtime, source: str, count: int | None, seed: int | None, preserve_keys: bool):
    """
    Print COUNT random top-level values (one bare value when COUNT is omitted).
    Fails when COUNT is larger than the number of values.
    """
    data = rt.load(source)
    click.echo(rt.dump(sampling.random(data, count, preserve_keys, rng=rt.rng(seed))))

# --- String commands ---

@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
def query(rt: Runtime, source: str):
    """Encode the document as an RFC 3986 URL query string."""
    click.echo(strings.query(rt.load(source)))


@main.command("join")
@pass_runtime
@click.argument("source", type=SOURCE)
@click.option("--glue", default=", ", show_default=True)
@click.option("--final", "final_glue", default="", help="Separator before the last value, e.g. ' and '.")
def join_(rt: Runtime, source: str, glue: str, final_glue: str):
    """Join the top-level values into one line."""
    click.echo(strings.join(rt.load(source), glue, final_glue))


@main.command()
@pass_runtime
@click.argument("source", type=SOURCE)
def table(rt: Runtime, source: str):
    """Show a list of records as a table with one column per dot path."""
    df = adapter_registry["TableAdapter"].to_dataframe(rt.load(source))
    if df.empty:
        click.echo("(no records)")
        return
    click.echo(df.to_string(index=False))

# --- Settings ---

@main.group()
def config():
    """Show or change the saved settings."""


@config.command("show")
@pass_runtime
def config_show(rt: Runtime):
    """Print the current settings."""
    click.echo(rt.dump(rt.settings.to_dict()))


@config.command("path")
@pass_runtime
def config_path(rt: Runtime):
    """Print the settings directory."""
    click.echo(str(rt.settings_dir))


@config.command("set")
@pass_runtime
@click.argument("key")
@click.argument("value")
def config_set(rt: Runtime, key: str, value: str):
    """
    Save a setting.

    Example: nestpath config set output_format yaml
    """
    data = rt.settings.to_dict()
    if key not in data:
        raise click.BadParameter(f"Unknown setting '{key}'. Known: {', '.join(data)}", param_hint="KEY")
    dict_path.assign(data, key, coerce_scalar(value))
    try:
        rt.settings = Settings.model_validate(data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e
    path = rt.save_settings()
    click.echo(f"Saved {key} to {path}")
