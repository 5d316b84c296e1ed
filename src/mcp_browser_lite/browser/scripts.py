"""JavaScript snippets evaluated inside pages."""

# Text of every element that is not hidden via display, visibility or opacity.
# Approximates what a human sees; nested elements repeat their children's text.
VISIBLE_TEXT_SCRIPT = """
Array.from(document.querySelectorAll('body, body *'))
  .filter(element => {
    const style = window.getComputedStyle(element);
    return style.display !== 'none' && style.visibility !== 'hidden' && style.opacity !== '0';
  })
  .map(element => element.textContent)
  .filter(text => text && text.trim().length > 0)
  .join('\\n')
"""

DOCUMENT_HTML_SCRIPT = "document.documentElement.outerHTML"

__all__ = ["VISIBLE_TEXT_SCRIPT", "DOCUMENT_HTML_SCRIPT"]
