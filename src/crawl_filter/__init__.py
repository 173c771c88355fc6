"""Tracks links, forms and cookies seen across crawl passes."""

from .core.config import FilterConfig, ResetPolicy, load_configuration
from .core.element_filter import ElementFilter
from .core.models import Category, Cookie, Form, Link
from .core.session import ScanSession
from .recon.page import Page
from .recon.trainer import Trainer, TrainingResult

__all__ = [
    "Category",
    "Cookie",
    "ElementFilter",
    "FilterConfig",
    "Form",
    "Link",
    "Page",
    "ResetPolicy",
    "ScanSession",
    "Trainer",
    "TrainingResult",
    "load_configuration",
]
