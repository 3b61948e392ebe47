#!/usr/bin/env python3
"""
Manage the portfolio catalog from the command line.

Talks to a running site through its JSON API, so the same rules apply
as in the admin page (short descriptions are derived server‑side,
ids and timestamps are assigned by the server).

Usage:
    python manage_cards.py --url http://localhost:8000 list
    python manage_cards.py --url http://localhost:8000 list --highlights
    python manage_cards.py --url http://localhost:8000 add --title "Photon Fury" \\
        --description "A 2D shooting game" --category Games --image ./cover.png
    python manage_cards.py --url http://localhost:8000 delete <card-id>
    python manage_cards.py --url http://localhost:8000 highlights
    python manage_cards.py --url http://localhost:8000 highlights 3

Admin commands need either --token (see create_token.py) or --username;
if --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from portfolio_api import PortfolioAPI

CATEGORIES = ("Home", "Software", "Games")


def _fail(error: dict) -> None:
    print(f"[!] {error.get('message')} (status {error.get('status_code')})", file=sys.stderr)
    sys.exit(1)


def _authenticate(client: PortfolioAPI, args) -> None:
    if client.api_key:
        return
    if not args.username:
        print("[!] This command needs --token or --username.", file=sys.stderr)
        sys.exit(1)
    password = args.password or getpass.getpass("Admin password: ")
    ok, error = client.login(args.username, password)
    if not ok:
        _fail(error or {"message": "Login failed"})


def cmd_list(client: PortfolioAPI, args) -> None:
    if args.highlights:
        cards, error = client.highlights(args.count)
    else:
        cards, error = client.list_cards()
    if error:
        _fail(error)
    for card in cards:
        print(f"{card['id']}  {card['category']:<8}  {card['title']}")


def cmd_add(client: PortfolioAPI, args) -> None:
    _authenticate(client, args)
    card = {
        "title": args.title,
        "description": args.description,
        "category": args.category,
    }
    if args.short_description:
        card["shortDescription"] = args.short_description
    if args.product_link:
        card["productLink"] = args.product_link
    if args.video_link:
        card["videoLink"] = args.video_link
    if args.image:
        image_path, error = client.upload_image(args.image)
        if error:
            _fail(error)
        card["imagePath"] = image_path
    created, error = client.create_card(card)
    if error:
        _fail(error)
    print(f"[+] Created card {created['id']}")


def cmd_delete(client: PortfolioAPI, args) -> None:
    _authenticate(client, args)
    ok, error = client.delete_card(args.card_id)
    if not ok:
        _fail(error)
    print(f"[+] Deleted card {args.card_id}")


def cmd_highlights(client: PortfolioAPI, args) -> None:
    if args.count is None:
        site_settings, error = client.get_settings()
        if error:
            _fail(error)
        print(f"Showing {site_settings.get('numberOfHighlights', 1)} highlight(s)")
        return
    _authenticate(client, args)
    _, error = client.update_settings(args.count)
    if error:
        _fail(error)
    print(f"[+] Showing {args.count} highlight(s)")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage portfolio cards through the site API.")
    ap.add_argument("--url", default="http://localhost:8000", help="Site root URL")
    ap.add_argument("--token", help="Admin bearer token")
    ap.add_argument("--username", help="Admin username (used when no --token is given)")
    ap.add_argument("--password", help="Admin password. If omitted, you'll be prompted securely.")
    sub = ap.add_subparsers(dest="command", required=True)

    lst = sub.add_parser("list", help="List all cards")
    lst.add_argument("--highlights", action="store_true", help="Only the highlighted cards, newest first")
    lst.add_argument("--count", type=int, help="With --highlights: how many (defaults to the site setting)")
    lst.set_defaults(func=cmd_list)

    add = sub.add_parser("add", help="Create a card")
    add.add_argument("--title", required=True)
    add.add_argument("--description", required=True)
    add.add_argument("--category", required=True, choices=CATEGORIES)
    add.add_argument("--short-description")
    add.add_argument("--product-link")
    add.add_argument("--video-link")
    add.add_argument("--image", help="Local image file to upload")
    add.set_defaults(func=cmd_add)

    delete = sub.add_parser("delete", help="Delete a card by id")
    delete.add_argument("card_id")
    delete.set_defaults(func=cmd_delete)

    highlights = sub.add_parser("highlights", help="Show or set the number of highlighted cards")
    highlights.add_argument("count", type=int, nargs="?")
    highlights.set_defaults(func=cmd_highlights)
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    client = PortfolioAPI(base_url=args.url, api_key=args.token)
    args.func(client, args)


if __name__ == "__main__":
    main()
