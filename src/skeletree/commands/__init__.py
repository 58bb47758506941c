"""Built-in CLI sub-commands for skeletree.

* :mod:`~skeletree.commands.tree` -- ``tree`` and ``nodes``: build a
  skeleton tree from a document and render it.
* :mod:`~skeletree.commands.config` -- ``config show|set|reset``: manage the
  user's default options.
"""
