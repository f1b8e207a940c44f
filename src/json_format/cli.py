"""Command-line interface for the JSON format codec."""

import logging
import sys
import click
from contextlib import nullcontext
from pathlib import Path
from . import __version__
from .json_format import JSONFormat
from .profiler import PerformanceProfiler
from .types import UNDEFINED
from .utils.validation import ValidationUtils


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Format - read and rewrite JSON as compact or pretty text."""
    pass


@main.command("format")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--pretty/--compact', default=True, help='Pretty-print (default) or write compact JSON')
@click.option('--indent', default="    ", help='Indent unit for pretty output (default: 4 spaces)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (default: stdout)')
@click.option('--profile', is_flag=True, help='Log timing and memory for the rewrite')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def format_command(input_file: Path, pretty: bool, indent: str, output: Path,
                   profile: bool, verbose: bool):
    """Rewrite a JSON file as pretty or compact JSON."""
    if verbose or profile:
        logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    
    text = input_file.read_text(encoding='utf-8')
    json_format = JSONFormat(indent=indent)
    profiler = PerformanceProfiler()
    
    input_size = len(text.encode("utf-8"))
    operation = profiler.profile_operation("format_json", input_size) if profile else nullcontext()
    
    with operation:
        data = json_format.read(text)
        if data is UNDEFINED:
            result = json_format.error_handler.validate_input(text)
            click.echo(f"❌ {input_file} is not valid JSON:", err=True)
            for message in ValidationUtils.error_messages(result):
                click.echo(f"   • {message}", err=True)
            sys.exit(1)
        
        json_string = json_format.write(data, pretty)
        if json_string is None:
            click.echo(f"❌ Could not write {input_file}: document is nested too deeply", err=True)
            sys.exit(1)
        if profile:
            profiler.record_output(len(json_string.encode('utf-8')))
    
    if output:
        output.write_text(json_string + "\n", encoding='utf-8')
        click.echo(f"✅ Successfully wrote JSON to {output}")
    else:
        click.echo(json_string)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(input_file: Path):
    """Check that a file contains valid JSON."""
    text = input_file.read_text(encoding='utf-8')
    result = ValidationUtils.validate_json_string(text)
    
    if not result.is_valid:
        click.echo(f"❌ {input_file} is not valid JSON:")
        for message in ValidationUtils.error_messages(result):
            click.echo(f"   • {message}")
        sys.exit(1)
    
    click.echo(f"✅ {input_file} is valid JSON")
    for warning in result.warnings:
        click.echo(f"   ⚠ {warning}")


if __name__ == '__main__':
    main()
