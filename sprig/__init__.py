"""Sprig: run requests for a binary code-size profiler.

Sprig answers questions about a binary's call graph: which items are the
largest, what each item's retained size is, and why a function was included
in the first place. This package holds the request side of that tool, the
validated description of what a profiling run should do.

Three ways to build a request, all sharing the same defaults:
- Command line: `sprig top|dominators|paths ...` parsed by `sprig.cli.CLI`
- Embedding hosts: field-by-field builders in `sprig.host`
- Request files: YAML or JSON loaded by `sprig.config.request`
"""

__version__ = "0.1.0"
