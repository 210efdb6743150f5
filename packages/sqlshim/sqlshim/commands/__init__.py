"""sqlshim: commands subpackage
---------------------------------------------------------
Implementation of the commands exposed by the ``sqlshim`` tool, built with
Typer. They translate command-line arguments into calls to the core resolver
and configuration loader.

Public API
----------
``check`` : Resolve a capability and report the outcome (``sqlshim check``)
``config`` : Configuration commands (``sqlshim config show``)
"""
