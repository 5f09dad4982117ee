"""
Stylesheet Assets
=================

Static CSS text referenced by the generated documents. Each entry is
written to the package as ``{metadata_root}/{name}.css``; the text is
passed through unchanged.
"""

from typing import Dict

GLOBAL_CSS = """\
html, body, div, span, h1, h2, h3, h4, h5, h6, p, blockquote, pre,
a, abbr, cite, code, em, img, q, small, strong, sub, sup,
dl, dt, dd, ol, ul, li, table, caption, tbody, tfoot, thead, tr, th, td,
article, aside, figure, figcaption, footer, header, main, nav, section {
  margin: 0;
  padding: 0;
  border: 0;
  font-size: 100%;
  font: inherit;
  vertical-align: baseline;
}

article, aside, figcaption, figure, footer, header, main, nav, section {
  display: block;
}

body {
  line-height: 1;
}

ol, ul {
  list-style: none;
}

blockquote, q {
  quotes: none;
}

table {
  border-collapse: collapse;
  border-spacing: 0;
}
"""

COVER_CSS = """\
body {
  font-family: serif;
  text-align: center;
  line-height: 1.5;
}

.cover {
  margin: 4rem 0;
}

.cover > * + * {
  margin-top: 1rem;
}

.cover__title {
  font-size: 2em;
  font-weight: bold;
}

.cover__author {
  font-size: 1.5em;
  font-weight: bold;
}
"""

NAVIGATION_CSS = """\
body {
  font-family: serif;
  line-height: 1.5;
}

nav {
  margin-top: 4rem;
  margin-bottom: 1rem;
}

ol.toc {
  list-style: none;
}

a {
  color: #38f;
  text-decoration: none;
}
"""

CONTENT_CSS = """\
body {
  font-family: serif;
  line-height: 1.5;
}

p + p {
  text-indent: 2em;
}

.chapter {
  margin-top: 4rem;
  margin-bottom: 1rem;
}

.chapter__title {
  font-size: 2em;
  font-weight: bold;
}
"""

STYLES: Dict[str, str] = {
    'global': GLOBAL_CSS,
    'cover': COVER_CSS,
    'navigation': NAVIGATION_CSS,
    'content': CONTENT_CSS,
}


def select_styles(*names: str) -> Dict[str, str]:
    """Return the named styles, in the order given."""
    return {name: STYLES[name] for name in names}
