"""
Component Set Arranger

Runs the grid layout over a selection of component sets and commits the
results through a LayoutHost.
"""

from __future__ import annotations
import argparse
import json
import os
import time
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pubsub import pub

from . import topics
from .host import DocumentHost, LayoutHost
from .layouts import GridLayout, GridPlan
from .layouts.clustering import DEFAULT_ALIGNMENT_THRESHOLD
from .layouts.layout_grid import DEFAULT_CORNER_RADIUS, DEFAULT_PADDING
from .objects import ComponentSetNode, Document
from .protocol import HostError, NodeType, Number

MESSAGES = {
    "NO_SELECTION": "Please select a ComponentSet.",
    "SUCCESS": "Done ✔️",
}

ENV_PREFIX = "CSGRID_"


def _parse_number(name: str, raw: str) -> Number:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class GridConfig:
    """Configuration for arranging component sets."""

    # Distance from the container edge to the content bounding box
    padding: Number = DEFAULT_PADDING
    corner_radius: Number = DEFAULT_CORNER_RADIUS
    # Maximum cross-axis distance for two variants to share a row/column
    alignment_threshold: Number = DEFAULT_ALIGNMENT_THRESHOLD

    # Print every bus event
    debug_events: bool = False

    def validate(self) -> None:
        if self.padding < 0:
            raise ValueError("padding must be >= 0")
        if self.corner_radius < 0:
            raise ValueError("corner_radius must be >= 0")
        if self.alignment_threshold < 0:
            raise ValueError("alignment_threshold must be >= 0")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GridConfig":
        """
        Build a config from CSGRID_* environment variables.

        Unset or empty variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in ("padding", "corner_radius", "alignment_threshold"):
            key = ENV_PREFIX + name.upper()
            raw = env.get(key, "").strip()
            if raw:
                values[name] = _parse_number(key, raw)
        debug = env.get(ENV_PREFIX + "DEBUG_EVENTS", "").strip().lower()
        if debug:
            values["debug_events"] = debug in ("1", "true", "yes", "on")
        return cls(**values)


@dataclass
class RunSummary:
    """Outcome of one run over a selection, by node id."""

    processed: List[Optional[str]] = field(default_factory=list)
    skipped: List[Optional[str]] = field(default_factory=list)
    failed: List[Optional[str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "processed": len(self.processed),
            "skipped": len(self.skipped),
            "failed": len(self.failed),
        }


class ComponentSetArranger:
    """
    Arranges the variants of selected component sets into a grid.

    Publishes RUN_*, CONTAINER_* and NOTIFY events on the bus. Containers
    are processed one by one; a container the host fails on is reported and
    the rest of the selection still runs.
    """

    def __init__(self, host: LayoutHost, config: Optional[GridConfig] = None):
        self.host = host
        self.config = config or GridConfig()
        self.config.validate()
        self.layout = GridLayout(
            padding=self.config.padding,
            corner_radius=self.config.corner_radius,
            alignment_threshold=self.config.alignment_threshold,
        )

        if self.config.debug_events:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def arrange(self, component_set: ComponentSetNode) -> Optional[GridPlan]:
        """Arrange one component set. Returns None if it has no variants."""
        plan = self.layout.calculate(component_set.children)
        if plan is None:
            pub.sendMessage(
                topics.CONTAINER_SKIPPED,
                container=component_set,
                reason=topics.SKIP_NO_VARIANTS,
            )
            return None

        self.host.commit(component_set, plan)
        pub.sendMessage(topics.CONTAINER_ARRANGED, container=component_set, plan=plan)
        return plan

    def run(self, selection: Sequence[Any]) -> RunSummary:
        """Arrange every component set in the selection."""
        summary = RunSummary()
        if not selection:
            pub.sendMessage(topics.NOTIFY, message=MESSAGES["NO_SELECTION"])
            return summary

        pub.sendMessage(topics.RUN_STARTED, count=len(selection))

        for node in selection:
            node_id = getattr(node, "id", None)
            if getattr(node, "type", None) != NodeType.COMPONENT_SET:
                summary.skipped.append(node_id)
                pub.sendMessage(
                    topics.CONTAINER_SKIPPED,
                    container=node,
                    reason=topics.SKIP_NOT_COMPONENT_SET,
                )
                continue

            try:
                self.arrange(node)
            except HostError as e:
                summary.failed.append(node_id)
                pub.sendMessage(topics.CONTAINER_FAILED, container=node, error=str(e))
                continue

            summary.processed.append(node_id)

        pub.sendMessage(
            topics.RUN_FINISHED,
            processed=len(summary.processed),
            failed=len(summary.failed),
        )

        if summary.processed:
            pub.sendMessage(topics.NOTIFY, message=MESSAGES["SUCCESS"])

        return summary


def _print_notice(message):
    print(message)


def _print_failure(container, error):
    node_id = getattr(container, "id", container)
    print(f"Warning: could not arrange {node_id}: {error}")


def _number_arg(raw: str) -> Number:
    return _parse_number("value", raw)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="csgrid",
        description="Arrange component set variants into an aligned grid.",
    )
    p.add_argument("--input", required=True, type=Path, help="Path to the document JSON.")
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the arranged document (default: overwrite --input).",
    )
    p.add_argument(
        "--select",
        action="append",
        default=None,
        metavar="ID",
        help="Node id to arrange; repeat for several. Overrides the document selection.",
    )
    p.add_argument("--padding", type=_number_arg, default=None)
    p.add_argument("--corner-radius", type=_number_arg, default=None)
    p.add_argument("--alignment-threshold", type=_number_arg, default=None)
    p.add_argument("--debug-events", action="store_true", default=False)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = _build_arg_parser().parse_args(argv)

    try:
        config = GridConfig.from_env()
        overrides: Dict[str, Any] = {
            name: value
            for name, value in (
                ("padding", args.padding),
                ("corner_radius", args.corner_radius),
                ("alignment_threshold", args.alignment_threshold),
            )
            if value is not None
        }
        if args.debug_events:
            overrides["debug_events"] = True
        config = replace(config, **overrides)
        config.validate()

        doc = Document.from_dict(json.loads(args.input.read_text(encoding="utf-8")))
        if args.select:
            doc.select(args.select)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    pub.subscribe(_print_notice, topics.NOTIFY)
    pub.subscribe(_print_failure, topics.CONTAINER_FAILED)

    arranger = ComponentSetArranger(DocumentHost(), config)
    summary = arranger.run(doc.selection)

    if not doc.selection:
        return 1

    output = args.output or args.input
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps(doc.to_dict(), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )

    print(json.dumps(summary.to_dict(), sort_keys=True, separators=(",", ":")))

    return 0 if summary.ok else 2


if __name__ == "__main__":
    import sys

    sys.exit(main())
