import json
from jinja2 import Template

TEXT_TMPL = Template("""\
{% for e in embeds -%}
=== Embed {{ loop.index }}/{{ loop.length }} ===
{% if e.title %}{{ e.title }}
{% endif %}{% if e.url %}{{ e.url }}
{% endif %}{% for f in e.fields %}[{{ f.name }}] {{ f.value }}
{% endfor %}{% if e.footer %}-- {{ e.footer.text }}
{% endif %}
{% endfor %}""")


def render_text(embeds):
    """Plaintext listing of the embeds, for eyeballing a dry run."""
    return TEXT_TMPL.render(embeds=embeds).rstrip("\n")


def render_json(embeds):
    return json.dumps(embeds, indent=2, ensure_ascii=False)
