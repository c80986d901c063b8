"""Command-line entry point for find-project.

Traverses the directory specified by $FP_FOLDER or $GOPATH/src to find a
folder depth-first and prints its absolute path, so it can be used from a
shell command substitution:

Example:
    $ cd "$(find-project autoscaler)"
    $ find-project tgen --sort-alphabetically
    $ FP_DEBUG=1 find-project tgen --include-vendor
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from find_project import __version__
from find_project.config.parser import load_config
from find_project.config.roots import debug_enabled, resolve_search_root
from find_project.exceptions import ConfigurationError, NotFoundError
from find_project.models.search_request import TraversalOrder
from find_project.tools.dir_walker import DirectoryWalker

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="find-project",
    help="Traverse the directory specified by $FP_FOLDER or $GOPATH to find a folder depth-first.",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    lvl = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.basicConfig(format="[%(levelname)s] %(message)s", level=lvl)
    logging.getLogger("find_project").setLevel(lvl)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"find-project {__version__}")
        raise typer.Exit()


@app.command()
def main(
    folder_name: str = typer.Argument(..., help="Name of the folder to find"),
    include_vendor: Optional[bool] = typer.Option(
        None,
        "--include-vendor/--no-include-vendor",
        help="Also search in \"vendor\" folders",
    ),
    include_hidden: Optional[bool] = typer.Option(
        None,
        "--include-hidden/--no-include-hidden",
        help="Also search in hidden (dot) folders",
    ),
    sort_alphabetically: Optional[bool] = typer.Option(
        None,
        "--sort-alphabetically/--no-sort-alphabetically",
        help="Sort folders alphabetically",
    ),
    breadth_first: Optional[bool] = typer.Option(
        None,
        "--breadth-first/--depth-first",
        help="Explore the tree level by level instead of branch by branch",
    ),
    follow_symlinks: Optional[bool] = typer.Option(
        None,
        "--follow-symlinks/--no-follow-symlinks",
        help="Follow symlinked folders",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a settings file (default: .findproject.yaml in cwd, home or ~/.config/find-project)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print every folder searched to stderr (same as setting $FP_DEBUG)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Find FOLDER_NAME under $FP_FOLDER or $GOPATH/src and print its path.
    
    Exits with code 0 when the folder was found, 1 when it does not exist,
    2 when the search root or settings are invalid.
    """
    _setup_logging(verbose)
    
    order = None
    if breadth_first is not None:
        order = TraversalOrder.BREADTH_FIRST if breadth_first else TraversalOrder.DEPTH_FIRST
    
    try:
        settings = load_config(config).settings
        root = resolve_search_root(fallback=settings.root)
        request = settings.build_request(
            folder_name,
            root,
            include_vendor=include_vendor,
            include_hidden=include_hidden,
            sort_alphabetically=sort_alphabetically,
            order=order,
            follow_symlinks=follow_symlinks,
        )
        logger.debug(f"Searching with {request}")
        
        result = DirectoryWalker(request).search()
        logger.debug(
            f"Scanned {result.directories_scanned} directories, "
            f"match relative to root: {result.relative_path()}"
        )
        path = result.raise_if_missing()
    except NotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_NOT_FOUND) from None
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None
    except ValidationError as e:
        typer.echo(f"Error: invalid search: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None
    
    typer.echo(path)
