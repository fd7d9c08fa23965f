# blog/markdown/postprocessors/heading_links.py

from bs4 import BeautifulSoup


def wrap_heading_links(html: str, context: dict) -> str:
    """
    Wrap the content of every id-bearing heading (h1-h6) in a link to itself.

    ``<h2 id="x">Title</h2>`` becomes ``<h2 id="x"><a href="#x">Title</a></h2>``.
    """
    soup = BeautifulSoup(html, "html.parser")

    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        identifier = heading.get("id")
        if not identifier:
            continue

        href = f"#{identifier}"
        children = [child for child in heading.contents if str(child).strip()]
        # Already wrapped (avoid nesting links on re-render)
        if len(children) == 1 and getattr(children[0], "name", None) == "a" and children[0].get("href") == href:
            continue

        link = soup.new_tag("a", href=href)
        for child in list(heading.contents):
            link.append(child.extract())
        heading.append(link)

    return str(soup)
