"""CLI runner for lead deduplication"""

import click
import sys
import yaml
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from leads_core.errors import LeadsError
from leads_core.logger import setup_logger
from leads_core.processor import LeadProcessor
from leads_config.loader import ConfigLoader


def load_settings(config_path):
    """Load and validate config, exiting on failure"""
    try:
        config = ConfigLoader.load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    is_valid, error = ConfigLoader.validate_config(config)
    if not is_valid:
        click.echo(f"✗ Config invalid: {error}", err=True)
        sys.exit(1)
    return config


@click.group()
def cli():
    """Lead deduplication CLI"""
    pass


@cli.command()
@click.option('--input', '-i', 'input_path', default=None,
              help='Input JSON file [default: leads.json]')
@click.option('--output', '-o', 'output_path', default=None,
              help='Output JSON file [default: filtered_leads_output.json]')
@click.option('--config', 'config_path', default=None, help='YAML config file')
@click.option('--dry-run', is_flag=True, help='Process without writing output')
def process(input_path: str, output_path: str, config_path: str, dry_run: bool):
    """Deduplicate leads by id, then by email"""
    config = load_settings(config_path)
    input_path = input_path or config['input']
    output_path = output_path or config['output']

    logger = setup_logger("leads", config['log_dir'] or None, config['log_level'])
    logger.info(f"Processing leads: {input_path} -> {output_path}")

    try:
        processor = LeadProcessor(diff_fields=config['diff_fields'])
        result = processor.process_leads(input_path, output_path, dry_run=dry_run)
    except LeadsError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    if dry_run:
        click.echo(f"✓ Dry run: {result.written} of {result.read} leads kept")
    else:
        click.echo(f"✓ Leads written: {result.written} of {result.read} "
                   f"({result.removed} duplicates removed)")
        click.echo(f"Output: {output_path}")


@cli.command()
@click.argument('input_path', type=click.Path())
def validate(input_path: str):
    """Validate a lead file without writing output"""
    try:
        result = LeadProcessor().process_leads(input_path, None, dry_run=True)
    except LeadsError as e:
        click.echo(f"✗ Invalid: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ {input_path}: {result.read} leads, {result.written} unique")


@cli.command()
@click.option('--host', default='127.0.0.1', help='Bind address')
@click.option('--port', default=8000, type=int, help='Bind port')
def serve(host: str, port: int):
    """Run the HTTP API"""
    import uvicorn
    from leads_api.main import app

    uvicorn.run(app, host=host, port=port)


if __name__ == '__main__':
    cli()
