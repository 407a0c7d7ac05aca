"""Custom colorschemes: replace the default for one call or for a context.

A colorscheme passed to highlight() replaces the default entirely, so
categories it leaves out print without color.
"""

from glow import Category, Colorscheme, HighlightConfig, highlight, highlight_config_context

SOURCE = """\
(defn fib [n]
  ;; naive on purpose
  (if (< n 2)
    n
    (+ (fib (- n 1)) (fib (- n 2)))))
"""

# Only comments and numbers are colored
print(highlight(SOURCE, {"comment": "yellow", "number": "magenta"}))

# Callables work as color functions too
underline = Colorscheme({Category.DEFINITION: lambda s: f"\033[4m{s}\033[0m"})
print(highlight(SOURCE, underline))

# Config loaded from JSON/TOML
config = HighlightConfig.from_dict({"colorscheme": {":conditional": "blue", ":core-fn": "cyan"}})
with highlight_config_context(config):
    print(highlight(SOURCE))
