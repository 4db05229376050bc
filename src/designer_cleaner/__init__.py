"""
Designer Cleaner Package

Reconciles a machine-generated ``X.Designer.cs`` partial class with its
hand-authored companion ``X.cs``.

When the visual designer regenerates a property (or its backing field) that
the developer has already moved into the companion file, the class ends up
declaring the member twice. This package finds those duplicates and either
reports them or removes them from the designer file.

LAYERS:
-------
    syntax        C# source  -> structured tree (tree-sitter)
    analyzer      designer class + companion properties -> DuplicateVerdict
    rewriter      verdict -> new designer file (clean mode)
    reporter      read-only duplicate summary (report mode)
    orchestrator  one directory, one mode, pairs in sequence

The companion file is never modified.
"""

__version__ = "0.1.0"
