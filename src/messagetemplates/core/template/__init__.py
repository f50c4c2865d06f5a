from .template_element import TextElement, PropertyElement, TemplateElement, Operator, Name, Index, Designator
from .template import Template
