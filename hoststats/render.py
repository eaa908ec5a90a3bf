"""Host Stats - HTML rendering"""

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import ReportSnapshot

_env = Environment(
    loader=PackageLoader('hoststats', 'templates'),
    autoescape=select_autoescape(['html', 'xml']),
)


def render_html(snapshot: ReportSnapshot, template_name: str = 'report.html') -> str:
    return _env.get_template(template_name).render(snapshot=snapshot)
