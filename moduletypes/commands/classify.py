"""
Handles the 'classify' command.

Loads a project snapshot file and reports, for each module, whether it
is an Android Gradle module, a Gradle module or a Kobalt module.

- Default output is JSONL streaming
- --pretty renders a Rich table
"""

from pathlib import Path

import click

from ..config import load_config, configure_logging, logger
from ..cli_utils import standard_command, add_common_options
from ..domain import Module
from ..exit_codes import NoModulesFoundError
from ..infra import ProjectFile
from ..output import emit
from ..services import ModuleClassifier


@click.command(name='classify')
@click.argument('project_file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('-m', '--module', 'module_names', multiple=True,
              help='Module to classify (repeatable, default: all modules)')
@add_common_options('pretty', 'verbose', 'quiet')
@standard_command
def classify_handler(project_file, module_names, pretty, verbose, quiet):
    """Classify the modules of a project snapshot.

    PROJECT_FILE: JSON, YAML or TOML snapshot listing modules, their
    facets and their external build system.

    \b
    Examples:
        moduletypes classify project.yaml
        moduletypes classify project.json -m app -m core
        moduletypes classify project.yaml --pretty
    """
    config = load_config()
    configure_logging(config, verbose=verbose)

    model = ProjectFile(project_file).load_model()
    classifier = ModuleClassifier.from_config(model, config)

    if module_names:
        modules = [Module(name) for name in module_names]
        missing = [module.name for module in modules if module not in model]
        if missing:
            raise NoModulesFoundError(
                f"Unknown modules in {project_file.name}: {', '.join(missing)}",
                missing=missing
            )
        results = [classifier.classify(module) for module in modules]
    else:
        if len(model) == 0:
            raise NoModulesFoundError(f"No modules found in {project_file.name}")
        results = list(classifier.classify_all())

    logger.debug(f"Classified {len(results)} modules from {project_file}")

    if not quiet:
        emit(results, pretty=pretty or bool(config.get('output', {}).get('pretty')))
