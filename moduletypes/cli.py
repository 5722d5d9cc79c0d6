#!/usr/bin/env python3

import click

from moduletypes.commands.classify import classify_handler
from moduletypes.commands.config import config_cmd
from moduletypes.commands.project import project_cmd


@click.group()
@click.version_option(package_name="moduletypes")
def cli():
    """moduletypes - Classify project modules by build system.

    Reports whether modules are Android Gradle, Gradle or Kobalt modules
    from a snapshot of the host project model.
    """
    pass


cli.add_command(classify_handler, name='classify')
cli.add_command(project_cmd)
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
