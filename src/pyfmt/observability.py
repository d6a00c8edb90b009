"""OpenTelemetry tracing for template expansion."""

from collections.abc import Iterable
import hashlib
import time

from opentelemetry import trace
from opentelemetry.trace import Status
from opentelemetry.trace import StatusCode

from pyfmt.core.errors import FormatError
from pyfmt.engine.driver import TemplateDriver
from pyfmt.engine.tokenizer import Token
from pyfmt.engine.tokenizer import tokenize

tracer = trace.get_tracer(__name__)


def traced_expand(
    driver: TemplateDriver,
    template: str,
    tokens: Iterable[Token] | None = None,
) -> str:
    """Expand a template inside a ``pyfmt.expand`` span.

    Args:
        driver: Driver holding the resolver and configuration
        template: Template text
        tokens: Pre-tokenized template; tokenized from ``template`` if None

    Returns:
        Rendered string

    Raises:
        FormatError: Re-raised after being recorded on the span

    """
    if tokens is None:
        tokens = tokenize(template)

    if not driver.config.trace_expansion:
        return driver.expand_tokens(tokens, template)

    with tracer.start_as_current_span("pyfmt.expand") as span:
        start_time = time.perf_counter()

        span.set_attribute("pyfmt.template_hash", _hash_template(template))
        span.set_attribute("pyfmt.resolver", type(driver.resolver).__name__)

        try:
            result = driver.expand_tokens(tokens, template)
        except FormatError as e:
            span.set_attribute("pyfmt.error", type(e).__name__)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise

        render_ms = (time.perf_counter() - start_time) * 1000
        span.set_attribute("pyfmt.field_count", driver.fields_rendered)
        span.set_attribute("pyfmt.render_ms", render_ms)
        span.set_attribute("pyfmt.result_length", len(result))

        return result


def _hash_template(template: str) -> str:
    """Generate hash of template for telemetry."""
    return hashlib.sha256(template[:500].encode()).hexdigest()[:16]
