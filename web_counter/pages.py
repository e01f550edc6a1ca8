HEAD = """<html>
    <head><title>toy-web-counter</title></head>
    <body>"""

TOP_TAIL = """<form action="/count-up" method="post">
      <div><button name="diff" value="1">Count Up</button></div>
    </form></body></html>"""

COUNTUP_TAIL = """<a href="/">Back to Top Page</a>
        </body></html>"""


def _render(n: int, tail: str) -> str:
    return "\n".join([HEAD, f"<p>Count = {n}</p>", tail])


def generate_top_page(n: int) -> str:
    return _render(n, TOP_TAIL)


def generate_countup_page(n: int) -> str:
    return _render(n, COUNTUP_TAIL)
