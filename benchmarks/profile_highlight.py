"""cProfile wrapper for Glow highlighting.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_highlight.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_highlight.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys

SAMPLE = r'''(ns app.core
  (:require [clojure.string :as str]))

;; Parse a config line like "port = 8080"
(defn parse-line [line]
  (when-let [[_ k v] (re-matches #"\s*(\w+)\s*=\s*(.*)" line)]
    [(keyword k) (try (Long/parseLong v) (catch Exception _ v))]))

(defn load-config [text]
  (->> (str/split-lines text)
       (remove #(str/starts-with? % "#"))
       (keep parse-line)
       (into {})))

(def ^:dynamic *verbose* false)

(defn report [cfg]
  (doseq [[k v] cfg]
    (if (nil? v)
      (println k "is unset")
      (printf "%s = %s%n" (name k) v))))
'''


def highlight_corpus(iterations: int = 200) -> None:
    """Highlight a sample namespace many times."""
    from glow import highlight

    source = SAMPLE * 10
    for _ in range(iterations):
        highlight(source)


def main() -> None:
    """Run profiling and print results."""
    from glow import highlight
    from glow.profiling import profiled_highlight

    print("Glow Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    iterations = 200
    print(f"\nHighlighting sample {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()

    highlight_corpus(iterations)

    profiler.disable()

    for title, key in (
        ("CUMULATIVE TIME", pstats.SortKey.CUMULATIVE),
        ("TOTAL (SELF) TIME", pstats.SortKey.TIME),
    ):
        print("\n" + "=" * 60)
        print(f"TOP 20 FUNCTIONS BY {title}")
        print("=" * 60 + "\n")

        s = io.StringIO()
        pstats.Stats(profiler, stream=s).sort_stats(key).print_stats(20)
        print(s.getvalue())

    with profiled_highlight() as metrics:
        highlight(SAMPLE)
    print("Spans per category for one pass:")
    for category, count in sorted(metrics.summary()["by_category"].items()):
        print(f"  {category:<14} {count}")


if __name__ == "__main__":
    main()
