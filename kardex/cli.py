"""CLI: command-line interface for kardex."""

import argparse
import sys

from kardex.app import App
from kardex.context import ChildOfSource, DependencyOf, DependentOf
from kardex.errors import ConstructionError, StorageError


def _find_topic(store, name: str):
    for topic in store.list_topics():
        if topic.name == name or str(topic.id) == name:
            return topic
    return None


def cmd_init(args, app: App):
    app.open_store()
    print(f"Database ready: {app.db_path}")
    app.close()


def cmd_topic(args, app: App):
    app.open_store()
    if args.topic_command == "add":
        try:
            topic_id = app.store.add_topic(args.name)
        except StorageError as e:
            print(f"Error: cannot add topic '{args.name}': {e}", file=sys.stderr)
            app.close()
            sys.exit(1)
        print(f"Added topic {topic_id}: {args.name}")
    else:
        topics = app.store.list_topics()
        if not topics:
            print("No topics.")
        for t in topics:
            print(f"  {t.id}: {t.name}")
    app.close()


def cmd_source(args, app: App):
    app.open_store()
    topic = _find_topic(app.store, args.topic)
    if topic is None:
        print(f"Error: unknown topic '{args.topic}'", file=sys.stderr)
        app.close()
        sys.exit(1)
    source_id = app.store.add_source(args.title, topic.id)
    print(f"Added source {source_id}: {args.title}")
    app.close()


def _context_from_args(args):
    if args.child_of is not None:
        return ChildOfSource(args.child_of)
    if args.dependency_of:
        return DependencyOf(args.dependency_of)
    if args.dependent_of:
        return DependentOf(args.dependent_of)
    return None


def cmd_add(args, app: App):
    app.open_store()
    try:
        screen = app.add_card_screen(_context_from_args(args))
    except ConstructionError as e:
        print(f"Error: {e}", file=sys.stderr)
        app.close()
        sys.exit(1)

    editor = screen.editor
    print(editor.prompt)
    editor.question.replace_text(args.question)
    editor.answer.replace_text(args.answer)
    if args.topic:
        topic = _find_topic(app.store, args.topic)
        if topic is None:
            print(f"Error: unknown topic '{args.topic}'", file=sys.stderr)
            app.close()
            sys.exit(1)
        editor.topics.select(topic.id)

    card_id = screen.submit(not args.unfinished)
    if card_id is None:
        print(f"Error: {screen.message}", file=sys.stderr)
        app.close()
        sys.exit(1)
    print(screen.message)
    app.close()


def cmd_show(args, app: App):
    if not app.db_path.exists():
        print("No database found. Run 'kardex init' first.")
        return
    app.open_store()
    try:
        card = app.store.fetch_card(args.card_id)
    except LookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        app.close()
        sys.exit(1)
    edges = app.store.fetch_edges(card.id)
    print(f"Card {card.id} ({card.status})")
    print(f"Q: {card.question}")
    print(f"A: {card.answer}")
    print(f"Topic:        {card.topic_id}")
    print(f"Source:       {card.source_id if card.source_id is not None else '-'}")
    print(f"Depends on:   {', '.join(map(str, edges['dependencies'])) or '-'}")
    print(f"Dependents:   {', '.join(map(str, edges['dependents'])) or '-'}")
    app.close()


def cmd_status(args, app: App):
    if not app.db_path.exists():
        print("No database found. Run 'kardex init' first.")
        return

    app.open_store()
    counts = app.store.counts()

    print(f"Cards:     {counts['total']} total ({counts['finished']} finished)")
    print(f"Sourced:   {counts['sourced']}")
    print(f"Edges:     {counts['edges']}")

    if counts["topics"]:
        print(f"\nTopics:")
        for name, cnt in counts["topics"]:
            print(f"  {name}: {cnt} cards")

    app.close()


def main():
    parser = argparse.ArgumentParser(prog="kardex", description="Card authoring for a knowledge graph")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("init", help="Create the database")

    p_topic = subparsers.add_parser("topic", help="Manage topics")
    topic_sub = p_topic.add_subparsers(dest="topic_command")
    p_topic_add = topic_sub.add_parser("add", help="Add a topic")
    p_topic_add.add_argument("name")
    topic_sub.add_parser("list", help="List topics")

    p_source = subparsers.add_parser("source", help="Add a reading source")
    p_source.add_argument("title")
    p_source.add_argument("--topic", required=True, help="Topic name or id")

    p_add = subparsers.add_parser("add", help="Add a card")
    p_add.add_argument("--question", "-q", default="")
    p_add.add_argument("--answer", "-a", default="")
    p_add.add_argument("--topic", help="Topic name or id (plain cards only)")
    p_add.add_argument("--unfinished", action="store_true", help="Add as unfinished")
    link = p_add.add_mutually_exclusive_group()
    link.add_argument("--child-of", type=int, metavar="SOURCE", help="Source id")
    link.add_argument("--dependency-of", type=int, nargs="+", metavar="CARD",
                      help="New card becomes a dependency of these cards")
    link.add_argument("--dependent-of", type=int, nargs="+", metavar="CARD",
                      help="New card becomes a dependent of these cards")

    p_show = subparsers.add_parser("show", help="Show a card and its edges")
    p_show.add_argument("card_id", type=int)

    subparsers.add_parser("status", help="Show card counts")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)
    if args.command == "topic" and not args.topic_command:
        p_topic.print_help()
        sys.exit(1)

    app = App()
    if not app.kardex_dir.exists():
        app.kardex_dir.mkdir(parents=True, exist_ok=True)
        print(f"Created kardex directory: {app.kardex_dir}")

    if args.command == "init":
        cmd_init(args, app)
    elif args.command == "topic":
        cmd_topic(args, app)
    elif args.command == "source":
        cmd_source(args, app)
    elif args.command == "add":
        cmd_add(args, app)
    elif args.command == "show":
        cmd_show(args, app)
    elif args.command == "status":
        cmd_status(args, app)
