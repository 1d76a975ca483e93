#!/usr/bin/env python3
"""Profile bbhtml to find performance bottlenecks."""

import cProfile
import io
import pstats

from bbhtml import BBCode

# Sample BBCode
text = """
[quote=Alice]Have a look at [url]http://example.com/[b]page[/b][/url][/quote]
[list=1]
[*][b]bold[/b] item
[*][color=red]red[/color] item with [email]someone@example.com[/email]
[*]nested [list][*]a[*]b[/list]
[/list]
[center][size=150]Title[/size][/center] <not a tag> [unknown]text[/unknown]
""" * 100  # Repeat for more meaningful results

# Profile
pr = cProfile.Profile()
pr.enable()

bbcode = BBCode()
for _ in range(10):
    _ = bbcode.render(text)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
