"""
CLI formatting functions.

Handles presentation for the command line:
- JSON and YAML for machine-readable output
- Rich tables for the example listing
- Plain text for demo output
"""

import io
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

FORMATS = ["text", "json", "yaml", "table"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    # Demo output has no tabular shape
    return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain lines."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_list(data["examples"])
    if isinstance(data, dict) and "runs" in data:
        return format_runs_text(data["runs"])
    return json.dumps(data, indent=2, default=str)


def format_examples_table(examples: List[Dict[str, str]]) -> str:
    """Format examples as a Rich table."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Family", style="green")
    table.add_column("Summary")
    for example in examples:
        table.add_row(example["name"], example["family"], example["summary"])

    buffer = io.StringIO()
    Console(file=buffer, force_terminal=False, width=120).print(table)
    return buffer.getvalue().rstrip("\n")


def format_examples_list(examples: List[Dict[str, str]]) -> str:
    """Format examples as aligned text lines."""
    if not examples:
        return "No examples found."
    width = max(len(example["name"]) for example in examples)
    return "\n".join(
        f"{example['name']:<{width}}  [{example['family']}] {example['summary']}"
        for example in examples
    )


def format_runs_text(runs: List[Dict[str, Any]]) -> str:
    """Format demo runs, one titled block per example."""
    blocks = []
    for run in runs:
        lines = [f"=== {run['name']} ==="]
        lines.extend(run["output"])
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
