"""Command-line interface for dampertest.

Provides commands to preview a session plan and to walk it interactively.

Usage:
    # Show the inspection order a plan generates
    dampertest preview plans/block_a.yaml

    # Walk a plan at the terminal
    dampertest walk plans/block_a.yaml

Walk commands:
    c [TEST_ID]   Mark the current damper complete
    s             Skip the current damper
    p             Pause the session
    r             Resume a paused session
    q             Quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from dampertest_core.errors import DampertestError
from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import TestSession

from dampertest_sequencing.controller import SessionController
from dampertest_sequencing.listener import CallbackListener
from dampertest_sequencing.plan import SessionPlan, load_session_plan


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_plan(path: str, out: TextIO) -> SessionPlan | None:
    try:
        return load_session_plan(path)
    except (FileNotFoundError, DampertestError) as exc:
        print(f"Error: {exc}", file=out)
        return None


def cmd_preview(args: argparse.Namespace, out: TextIO | None = None) -> int:
    """Print the inspection order a plan generates."""
    out = out or sys.stdout
    plan = _load_plan(args.plan, out)
    if plan is None:
        return 1

    params = plan.parameters
    print(f"Building: {plan.building}", file=out)
    if plan.name:
        print(f"Session: {plan.name}", file=out)
    print(
        f"Floors {params.start_floor}-{params.top_floor}, "
        f"{params.dampers_per_floor} damper(s) per floor",
        file=out,
    )
    print(f"This will create {params.item_count} damper tests", file=out)
    print(file=out)
    for index, item in enumerate(params.generate(), start=1):
        print(f"  {index:3d}. {item.label}", file=out)
    return 0


def cmd_walk(
    args: argparse.Namespace,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Walk a plan interactively."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    plan = _load_plan(args.plan, out)
    if plan is None:
        return 1

    def show_item(item: SequenceItem, session: TestSession) -> None:
        print(
            f"[{session.current_index + 1}/{session.total_count}] {item.label}",
            file=out,
        )

    def show_complete(session: TestSession) -> None:
        print(
            f"Session complete: {session.completed_count}/{session.total_count} dampers tested",
            file=out,
        )

    controller = SessionController(
        listener=CallbackListener(start_test=show_item, session_complete=show_complete),
        config=plan.controller,
    )
    session = controller.create_session(
        plan.building,
        parameters=plan.parameters,
        name=plan.name,
        project_id=plan.project_id,
    )
    print(f"Session: {session.name} ({session.total_count} dampers)", file=out)
    controller.start(session.id)

    for line in stdin:
        parts = line.split()
        if not parts:
            continue
        command = parts[0].lower()

        try:
            if command == "c":
                controller.mark_current_complete(parts[1] if len(parts) > 1 else None)
            elif command == "s":
                controller.skip_current()
            elif command == "p":
                if controller.pause() is not None:
                    print("Paused", file=out)
            elif command == "r":
                controller.start(session.id)
            elif command == "q":
                break
            else:
                print(f"Unknown command: {command}", file=out)
        except DampertestError as exc:
            print(f"Error: {exc}", file=out)

        current = controller.get(session.id)
        if current is not None and current.is_completed:
            break

    final = controller.get(session.id)
    if final is not None and not final.is_completed:
        print(
            f"Stopped at {final.status.label}: "
            f"{final.completed_count}/{final.total_count} dampers tested",
            file=out,
        )
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Floor-by-floor damper test sequencing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    preview_parser = subparsers.add_parser("preview", help="Show the inspection order of a plan")
    preview_parser.add_argument("plan", help="Path to the session plan YAML file")

    walk_parser = subparsers.add_parser("walk", help="Walk a session plan interactively")
    walk_parser.add_argument("plan", help="Path to the session plan YAML file")

    args = parser.parse_args()
    setup_logging(args.debug)

    if args.command == "preview":
        return cmd_preview(args)
    if args.command == "walk":
        return cmd_walk(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
