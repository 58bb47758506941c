"""Tree commands -- build a skeleton tree from a document and show it.

``skeletree tree`` renders the folder/request hierarchy; ``skeletree nodes``
lists every node with its type and parent(s). Both resolve their options
through :func:`~skeletree.config.resolve_options`, so flags override
``SKELETREE_*`` environment variables, which override the project and user
config files.
"""

from __future__ import annotations

from typing import Optional

import typer

from skeletree.config import resolve_options
from skeletree.exceptions import SkeletreeError
from skeletree.generator import generate_skeleton_tree
from skeletree.graph import SkeletonTree
from skeletree.models import NodeType
from skeletree.output import debug, error, get_output, info, node_rows
from skeletree.parser import extract_document, load_document

_SOURCE_HELP = "Path to an OpenAPI JSON/YAML document, or '-' for stdin."
_STRATEGY_HELP = "Folder strategy: paths, tags, tagshierarchical."


def _build_tree(
    source: str,
    strategy: Optional[str],
    webhooks: Optional[bool],
    deprecated: Optional[bool],
) -> SkeletonTree:
    """Load *source* and build its tree with the resolved options.

    Raises:
        typer.Exit: With the error's exit code when the options are
            invalid or the document cannot be loaded.
    """
    try:
        options = resolve_options(
            cli_folder_strategy=strategy,
            cli_include_webhooks=webhooks,
            cli_include_deprecated=deprecated,
        )
        debug(f"Options: {options.model_dump()}")
        document = extract_document(load_document(source))
        return generate_skeleton_tree(document, options)
    except SkeletreeError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def tree_command(
    source: str = typer.Argument(help=_SOURCE_HELP),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", "-s", help=_STRATEGY_HELP
    ),
    webhooks: Optional[bool] = typer.Option(
        None, "--webhooks/--no-webhooks", help="Append the webhook subtree."
    ),
    deprecated: Optional[bool] = typer.Option(
        None, "--deprecated/--no-deprecated", help="Keep deprecated operations."
    ),
    show_ids: bool = typer.Option(
        False, "--ids", help="Show node ids next to their labels."
    ),
) -> None:
    """Render the folder/request tree of an API document.

    Example::

        skeletree tree openapi.yaml
        skeletree tree openapi.yaml --strategy tags --webhooks
        cat openapi.json | skeletree --json tree -
    """
    tree = _build_tree(source, strategy, webhooks, deprecated)
    get_output().print_tree(tree, show_ids=show_ids)

    requests = sum(
        1
        for node_id in tree.nodes()
        if tree.node(node_id).type in (NodeType.REQUEST, NodeType.WEBHOOK_REQUEST)
    )
    info(f"{len(tree)} nodes, {requests} requests")


def nodes_command(
    source: str = typer.Argument(help=_SOURCE_HELP),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", "-s", help=_STRATEGY_HELP
    ),
    webhooks: Optional[bool] = typer.Option(
        None, "--webhooks/--no-webhooks", help="Append the webhook subtree."
    ),
    deprecated: Optional[bool] = typer.Option(
        None, "--deprecated/--no-deprecated", help="Keep deprecated operations."
    ),
) -> None:
    """List every node of the tree with its type and parent.

    Example::

        skeletree nodes openapi.yaml --strategy tagshierarchical
    """
    tree = _build_tree(source, strategy, webhooks, deprecated)
    get_output().print_table(
        ["Id", "Type", "Parent", "Name"],
        node_rows(tree),
        title=f"Nodes ({len(tree)})",
    )
