"""Highlight a line of Clojure in 3 lines — zero config, zero deps."""

from glow import highlight

print(highlight('(defn greet [name] (str "Hello, " name "!")) ; say hi'))
