"""
encrypt_storage — Live Demo
===========================
Walks through writing, reading and bulk-removing encrypted records,
printing the raw store next to what the application sees.

Run with:
  python demo.py [directory]

With a directory argument the local scope is persisted there as JSON;
otherwise everything stays in memory.
"""

import sys
import os

# Ensure the package root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from encrypt_storage.storage import EncryptStorage, StorageContext


# ── ANSI colours ──────────────────────────────────────────────────────────────
GREEN   = "\033[92m"
YELLOW  = "\033[93m"
CYAN    = "\033[96m"
BOLD    = "\033[1m"
DIM     = "\033[2m"
RESET   = "\033[0m"
MAGENTA = "\033[95m"
BLUE    = "\033[94m"


def sep(title: str = "", char: str = "─") -> None:
    width = 66
    if title:
        pad = (width - len(title) - 2) // 2
        print(f"\n{DIM}{char * pad} {RESET}{BOLD}{title}{RESET}{DIM} {char * (width - pad - len(title) - 2)}{RESET}")
    else:
        print(f"{DIM}{char * width}{RESET}")


def header(text: str) -> None:
    print(f"\n{BOLD}{BLUE}{text}{RESET}")
    sep()


def on_event(event: dict) -> None:
    print(f"  {MAGENTA}[event]{RESET} {event}")


def main():
    print()
    print(f"{BOLD}{'═' * 66}{RESET}")
    print(f"{BOLD}{'  ENCRYPT STORAGE — DEMO':^66}{RESET}")
    print(f"{BOLD}{'═' * 66}{RESET}")

    if len(sys.argv) > 1:
        context = StorageContext.from_directory(sys.argv[1])
    else:
        context = StorageContext.in_memory()

    storage = EncryptStorage(
        "demo-secret-key-change-me",
        context        = context,
        prefix         = "demo",
        notify_handler = on_event,
    )

    # ── STEP 1 ─ Write ────────────────────────────────────────────────────────
    header("STEP 1 — WRITE")

    storage.set_item("user", {"id": 1, "name": "Ana", "roles": ["admin"]})
    storage.set_item("theme", "dark")
    storage.set_item("cart:1", [101, 102])
    storage.set_item("cart:2", [205])
    storage.set_item("flags", {"beta": True}, skip_encryption=True)

    # ── STEP 2 ─ Raw store ────────────────────────────────────────────────────
    header("STEP 2 — WHAT THE STORE HOLDS")

    raw_store = storage.storage
    for physical_key in raw_store.keys():
        record = raw_store.get_item(physical_key)
        short  = record[:40] + "..." if len(record) > 40 else record
        print(f"  {CYAN}{physical_key:<14}{RESET} {DIM}{short}{RESET}")
    print(f"\n{DIM}  ↑ only 'flags' was written with encryption skipped.{RESET}")

    # ── STEP 3 ─ Read ─────────────────────────────────────────────────────────
    header("STEP 3 — READ")

    print(f"  user  → {GREEN}{storage.get_item('user')!r}{RESET}")
    print(f"  theme → {GREEN}{storage.get_item('theme')!r}{RESET}")
    print(f"  carts → {GREEN}{storage.get_item_from_pattern('cart')!r}{RESET}")

    # ── STEP 4 ─ Bulk remove ──────────────────────────────────────────────────
    header("STEP 4 — REMOVE BY PATTERN")

    storage.remove_item_from_pattern("cart")
    print(f"  {YELLOW}remaining records:{RESET} {storage.length}")

    # ── STEP 5 ─ Out-of-band ──────────────────────────────────────────────────
    header("STEP 5 — ENCRYPT A VALUE WITHOUT STORING IT")

    token = storage.encrypt_value({"order": 42})
    print(f"  ciphertext → {DIM}{token[:40]}...{RESET}")
    print(f"  decrypted  → {GREEN}{storage.decrypt_value(token)!r}{RESET}")

    print()
    sep(char="═")
    print(f"  {BOLD}{GREEN}✓  {len(storage.logger)} operations logged, no values in the log.{RESET}")
    sep(char="═")
    print()


if __name__ == "__main__":
    main()
