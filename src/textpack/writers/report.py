"""Static HTML overview of the extracted pages."""

from html import escape
from pathlib import Path
from typing import Sequence

from textpack.models import ExtractionResult, RunMetadata, relative_path
from textpack.writers.corpus import NO_TEXT

PREVIEW_CHARS = 2000

_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>textpack - Readable UI</title>
  <style>
    body{{font-family:system-ui,Segoe UI,Roboto,Helvetica,Arial;margin:20px;line-height:1.5;background:#f8f6ff;}}
    h1{{color:#21014b;}}
    h3{{margin-bottom:0;}}
    .search{{width:100%;padding:10px;border:1px solid #ccc;border-radius:8px;margin-bottom:20px;}}
    .file{{border-radius:12px;padding:12px;margin-bottom:10px;box-shadow:0 6px 18px rgba(0,0,0,0.06);background:#fff;}}
    button.toggle{{background:#21014b;color:#fff;border:none;padding:8px 10px;border-radius:8px;cursor:pointer;}}
    pre{{white-space:pre-wrap;word-break:break-word;background:#f8f9fa;padding:12px;border-radius:8px;overflow-x:auto;}}
  </style>
</head>
<body>
  <h1>textpack - Readable UI</h1>
  <p>Generated from: <strong>{source}</strong> on {generated_at}</p>
  <input class="search" placeholder="Filter files or text..." />
  <div id="list">
{sections}
  </div>
  <script>
    document.querySelectorAll('.toggle').forEach(btn => {{
      btn.addEventListener('click', () => {{
        const tgt = document.querySelector(btn.dataset.target);
        const expanded = btn.getAttribute('aria-expanded') === 'true';
        btn.setAttribute('aria-expanded', !expanded);
        tgt.hidden = expanded;
      }});
    }});
    document.querySelector('.search').addEventListener('input', e => {{
      const q = e.target.value.toLowerCase();
      document.querySelectorAll('.file').forEach(sec => {{
        sec.style.display = sec.innerText.toLowerCase().includes(q) ? '' : 'none';
      }});
    }});
  </script>
</body>
</html>
"""

_SECTION = """    <section class="file" data-file="{rel}">
      <h3><button aria-expanded="false" class="toggle" data-target="#{anchor}">{rel}</button></h3>
      <div id="{anchor}" class="content" hidden>
        <pre>{preview}</pre>
      </div>
    </section>"""


def render_report(items: Sequence[ExtractionResult], meta: RunMetadata) -> str:
    """Render one collapsible section per page with a text preview."""
    sections = []
    for i, item in enumerate(items):
        rel = escape(relative_path(item.path, meta.source))
        preview = (item.text or NO_TEXT)[:PREVIEW_CHARS]
        sections.append(
            _SECTION.format(rel=rel, anchor=f"file-{i}", preview=escape(preview, quote=False))
        )

    return _PAGE.format(
        source=escape(str(meta.source)),
        generated_at=escape(meta.generated_at),
        sections="\n".join(sections),
    )


def write_report(items: Sequence[ExtractionResult], out_path: Path, meta: RunMetadata) -> Path:
    """Write the HTML overview for the successful pages."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_report(items, meta), encoding="utf-8")
    return out_path
