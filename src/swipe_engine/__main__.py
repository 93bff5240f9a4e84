from __future__ import annotations
import argparse, json, os, sys
from . import Engine, LoadError, ScoringParams, normalize
from . import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(rows):
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#  Score     Freq          Distance  Word", "1;37"))
    for r in rows:
        print(f"{r['rank']:<2} {r['score']:<9.4f} {r['frequency']:<13g} {r['distance']:<9.3f} {r['word']}")

def _load(engine: Engine, path: str) -> bool:
    try:
        n = engine.load(path)
    except LoadError as e:
        print(_c(f"load failed (code {e.code}): {e}", "1;31"), file=sys.stderr)
        return False
    print(_c(f"(loaded {n:,} words from {path})", "2;36"))
    return True

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Swipe decoding REPL: type a letter trace, get ranked words")
    parser.add_argument("--dict", dest="dict_path", default=str(CFG.BUNDLED_DICTIONARY),
                        help="word<sep>frequency file (default: bundled dictionary)")
    parser.add_argument("--limit", type=int, default=CFG.TOP_K)
    parser.add_argument("--alpha", type=float, default=None, help="path/frequency blend weight in (0,1)")
    parser.add_argument("--insertion", type=float, default=None, help="cost of an extra sampled letter")
    parser.add_argument("--deletion", type=float, default=None, help="cost of a word letter never sampled")
    parser.add_argument("--scale", type=float, default=None, help="similarity decay, S = exp(-D/scale)")
    parser.add_argument("--window", type=int, default=None, help="candidate length window (+/-)")
    parser.add_argument("--json", action="store_true", help="print one JSON array per trace")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        params = ScoringParams.from_config().with_overrides(
            alpha=args.alpha, insertion_penalty=args.insertion, deletion_penalty=args.deletion,
            scale=args.scale, length_window=args.window,
        )
    except ValueError as e:
        parser.error(str(e))

    engine = Engine(params, verbose=args.verbose)
    if not _load(engine, args.dict_path):
        return 2

    if not args.json:
        print("Type a swipe trace and press Enter (empty to quit).")
        print(_c("Commands: :reload PATH, :params", "2;37"))

    while True:
        try:
            raw = input("" if args.json else "> ")
        except EOFError:
            print(); break
        cmd = raw.strip()
        if cmd == "":
            if not args.json:
                print("Goodbye!")
            break
        if cmd.startswith(":reload"):
            path = cmd[len(":reload"):].strip() or args.dict_path
            _load(engine, path); continue
        if cmd == ":params":
            print(json.dumps(engine.params.to_dict())); continue

        hits = engine.predict(raw, limit=args.limit)
        if args.json:
            print(json.dumps([h.to_dict() for h in hits])); continue
        print(_c(f"[query] {normalize(raw)!r}", "2;37"))
        rows = []
        for i, h in enumerate(hits, start=1):
            rows.append({"rank": i, "score": h.score, "frequency": h.frequency,
                         "distance": h.distance, "word": h.word})
        _print_table(rows)
    return 0

if __name__ == "__main__":
    sys.exit(main())
