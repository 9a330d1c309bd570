"""
Build the commonality table (word -> corpus frequency) for the positional scorer.

What it does:
- Optionally downloads corpus archives (e.g. iWeb / COCA sample zips) into
  the corpus directory.
- Streams every .zip / .txt source, counting 5-letter words (plurals folded
  to their stem) that appear in the lexicon.
- Writes a JSON object word -> count.

Usage:
    python -m script.build_commonality --lexicon data/lexicon.txt \
        --corpus text_data/ --out text_data/commonality.json
    # fetch an archive first:
    python -m script.build_commonality --lexicon data/lexicon.txt \
        --url https://example.org/sample.zip --corpus text_data/ --out text_data/commonality.json
"""

import argparse
import logging
from pathlib import Path
from urllib.parse import urlparse

import requests

from packages.datasets import count_commonality, load_lexicon, save_commonality
from packages.engine import LexiconIndex

log = logging.getLogger("build_commonality")

SOURCE_SUFFIXES = (".zip", ".txt")


def download(url: str, dest_dir: Path) -> Path:
    """Stream `url` into dest_dir, keeping the remote file name."""
    dest_dir.mkdir(parents=True, exist_ok=True)
    name = Path(urlparse(url).path).name or "corpus.zip"
    out = dest_dir / name
    log.info("downloading %s -> %s", url, out)
    with requests.get(url, stream=True, timeout=60) as r:
        r.raise_for_status()
        with out.open("wb") as f:
            for chunk in r.iter_content(chunk_size=1 << 16):
                f.write(chunk)
    return out


def collect_sources(paths) -> list[Path]:
    """Expand directories to their .zip/.txt files (sorted); keep files as given."""
    out = []
    for p in map(Path, paths):
        if p.is_dir():
            out += sorted(q for q in p.iterdir() if q.suffix.lower() in SOURCE_SUFFIXES)
        elif p.exists():
            out.append(p)
        else:
            raise FileNotFoundError(p)
    return out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build a word commonality table from text corpora")
    ap.add_argument("--lexicon", required=True, help="one word per line")
    ap.add_argument("--corpus", nargs="+", required=True,
                    help="corpus files or directories (.zip / .txt)")
    ap.add_argument("--url", action="append", default=[],
                    help="download this archive into the first --corpus directory first (repeatable)")
    ap.add_argument("--out", required=True, help="output JSON path")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    # validates every entry; InvalidWord aborts the build
    index = LexiconIndex.build(load_lexicon(args.lexicon))

    for url in args.url:
        download(url, Path(args.corpus[0]))

    sources = collect_sources(args.corpus)
    if not sources:
        raise SystemExit(f"no corpus sources found under {args.corpus}")

    counts = count_commonality(sources, index.members)
    save_commonality(counts, args.out)
    print(f"Wrote {len(counts)} words ({sum(counts.values())} hits) -> {args.out}")


if __name__ == "__main__":
    main()
