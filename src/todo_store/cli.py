from __future__ import annotations

import argparse
import sys
from typing import TextIO

from todo_store.config import DEFAULT_TASKS_FILE, Settings
from todo_store.logging_setup import setup_logging
from todo_store.models import CompleteResult, DeleteResult
from todo_store.store import TaskStore

MENU = """
===== TO-DO TASK MANAGER =====
1. Add new task
2. Mark task as completed
3. Delete a task
4. Display all tasks
5. Exit"""


def build_store(settings: Settings) -> TaskStore:
    return TaskStore(settings.tasks_file)


def report_save_error(store: TaskStore) -> None:
    if store.last_save_error is not None:
        print(f"Error: Unable to open file for writing: {store.path}", file=sys.stderr)


def render_tasks(store: TaskStore, out: TextIO) -> None:
    tasks = store.list_tasks()
    if not tasks:
        print("No tasks in the list.", file=out)
        return

    print("\n------ TO-DO LIST ------", file=out)
    for task in tasks:
        status = "Completed" if task.done else "Pending"
        print(f"ID: {task.id} | Task: {task.title} | Status: {status}", file=out)
    print("------------------------", file=out)


def add(store: TaskStore, title: str, out: TextIO) -> int:
    task_id = store.add_task(title)
    print(f"Task added successfully with ID: {task_id}", file=out)
    report_save_error(store)
    return 0


def complete(store: TaskStore, task_id: int, out: TextIO) -> int:
    result = store.complete_task(task_id)
    if result is CompleteResult.NOT_FOUND:
        print(f"Task with ID {task_id} not found.", file=out)
        return 1
    if result is CompleteResult.ALREADY_DONE:
        print("Task is already marked as completed.", file=out)
        return 0
    print(f"Task ID {task_id} marked as completed.", file=out)
    report_save_error(store)
    return 0


def delete(store: TaskStore, task_id: int, out: TextIO) -> int:
    result = store.delete_task(task_id)
    if result is DeleteResult.NOT_FOUND:
        print(f"Task with ID {task_id} not found.", file=out)
        return 1
    print(f"Task ID {task_id} deleted successfully.", file=out)
    report_save_error(store)
    return 0


def _prompt(text: str, stdin: TextIO, out: TextIO) -> str | None:
    print(text, end="", file=out, flush=True)
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _prompt_id(text: str, stdin: TextIO, out: TextIO) -> int | None:
    raw = _prompt(text, stdin, out)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        print("Invalid task ID.", file=out)
        return None


def run_menu(store: TaskStore, stdin: TextIO, out: TextIO) -> int:
    """Numbered menu loop. Ends on choice 5 or end of input."""
    while True:
        print(MENU, file=out)
        raw = _prompt("Enter your choice: ", stdin, out)
        if raw is None:
            print(file=out)
            break
        choice = raw.strip()

        if choice == "1":
            title = _prompt("Enter task description: ", stdin, out)
            if title is not None:
                add(store, title, out)
        elif choice == "2":
            task_id = _prompt_id("Enter task ID to mark as completed: ", stdin, out)
            if task_id is not None:
                complete(store, task_id, out)
        elif choice == "3":
            task_id = _prompt_id("Enter task ID to delete: ", stdin, out)
            if task_id is not None:
                delete(store, task_id, out)
        elif choice == "4":
            render_tasks(store, out)
        elif choice == "5":
            print("Exiting...", file=out)
            break
        else:
            print("Invalid choice. Please try again.", file=out)
    return 0


def cmd_add(store: TaskStore, args: argparse.Namespace) -> int:
    return add(store, args.title, sys.stdout)


def cmd_done(store: TaskStore, args: argparse.Namespace) -> int:
    return complete(store, args.task_id, sys.stdout)


def cmd_delete(store: TaskStore, args: argparse.Namespace) -> int:
    return delete(store, args.task_id, sys.stdout)


def cmd_list(store: TaskStore, _args: argparse.Namespace) -> int:
    render_tasks(store, sys.stdout)
    return 0


def cmd_menu(store: TaskStore, _args: argparse.Namespace) -> int:
    return run_menu(store, sys.stdin, sys.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-store", description="Single-user to-do list")
    parser.add_argument("--file", default=DEFAULT_TASKS_FILE, help="tasks file (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--log-file", help="also write full logs to this file")
    parser.set_defaults(handler=cmd_menu)
    sub = parser.add_subparsers(dest="command")

    add_cmd = sub.add_parser("add", help="add task")
    add_cmd.add_argument("title")
    add_cmd.set_defaults(handler=cmd_add)

    done = sub.add_parser("done", help="mark task as completed")
    done.add_argument("task_id", type=int)
    done.set_defaults(handler=cmd_done)

    delete_cmd = sub.add_parser("delete", help="delete task")
    delete_cmd.add_argument("task_id", type=int)
    delete_cmd.set_defaults(handler=cmd_delete)

    show = sub.add_parser("list", help="display all tasks")
    show.set_defaults(handler=cmd_list)

    menu = sub.add_parser("menu", help="interactive menu (default)")
    menu.set_defaults(handler=cmd_menu)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings.from_args(args)
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)

    with build_store(settings) as store:
        return int(args.handler(store, args))


if __name__ == "__main__":
    raise SystemExit(main())
