"""OpenTelemetry tracing helpers for the support chat engine.

Spans are recorded around the two halves of every answered query: retrieval
(classification plus document ranking) and synthesis (template selection and
text assembly).

Key concepts:
- Span          : a single named, timed unit of work (one retrieval, one synthesis)
- Trace         : a tree of spans describing one answered query
- TracerProvider: configures how spans are created and exported
- Exporter      : receives completed spans and forwards them to a backend

Usage with an OTLP collector:

    from support_rag.tracing import build_traced_chat_pipeline, configure_tracing, get_tracer

    configure_tracing(endpoint="http://localhost:4318/v1/traces")
    pipeline = build_traced_chat_pipeline(engine, get_tracer("support-rag"))
    result = pipeline("How do I register for an event?")

Usage without a backend (development / testing):

    configure_tracing()   # uses ConsoleSpanExporter by default
"""
from __future__ import annotations

from typing import Callable

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

from .pipeline import ChatEngine
from .schema import Answer, RetrievalContext, UserProfile

# ---------------------------------------------------------------------------
# Span attribute names
# ---------------------------------------------------------------------------

ATTR_INPUT_VALUE = "input.value"
ATTR_OUTPUT_VALUE = "output.value"
ATTR_RETRIEVAL_DOCUMENTS = "retrieval.documents"
ATTR_RETRIEVAL_MODE = "retrieval.mode"
ATTR_FROM_KNOWLEDGE_BASE = "answer.from_knowledge_base"

OUTPUT_PREVIEW_CHARS = 500

# ---------------------------------------------------------------------------
# Provider lifecycle helpers
# ---------------------------------------------------------------------------

_provider: TracerProvider | None = None


def configure_tracing(
    endpoint: str | None = None,
    service_name: str = "support-rag",
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """Create and register a global TracerProvider.

    Args:
        endpoint: OTLP HTTP endpoint URL. When *None* and no *exporter* is
            given, spans are printed to stdout.
        service_name: Service label shown by the observability backend.
        exporter: Pre-built exporter, e.g. ``InMemorySpanExporter`` in tests.
            When provided, *endpoint* is ignored.

    Returns:
        The configured provider, also registered as the global OTel provider.
    """
    global _provider

    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)

    if exporter is not None:
        chosen_exporter: SpanExporter = exporter
    elif endpoint is not None:
        try:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
                OTLPSpanExporter,
            )
        except ImportError as exc:  # pragma: no cover
            raise ImportError(
                "opentelemetry-exporter-otlp-proto-http is required to export "
                "traces to an OTLP endpoint.  Install it with:\n"
                "  pip install 'support-rag[otlp]'"
            ) from exc
        chosen_exporter = OTLPSpanExporter(endpoint=endpoint)
    else:
        chosen_exporter = ConsoleSpanExporter()

    # Spans are exported synchronously so tests can read them right away.
    provider.add_span_processor(SimpleSpanProcessor(chosen_exporter))
    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer from the provider set by :func:`configure_tracing`.

    Falls back to the global (no-op by default) provider when tracing has not
    been configured.
    """
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


# ---------------------------------------------------------------------------
# Span-wrapping helpers
# ---------------------------------------------------------------------------


def retrieval_mode(context: RetrievalContext) -> str:
    if context.is_greeting:
        return "greeting"
    if context.is_list_query:
        return "list"
    return "top_k"


def traced_retrieval(
    retriever: Callable[..., RetrievalContext],
    tracer: trace.Tracer,
) -> Callable[..., RetrievalContext]:
    """Wrap a context retriever so every call is recorded as a ``"retrieval"`` span.

    The span records:

    - ``input.value``: the query
    - ``retrieval.documents``: number of ranked documents in the context
    - ``retrieval.mode``: ``greeting``, ``list`` or ``top_k``
    - span status: OK on success, ERROR on exception

    Args:
        retriever: Callable with signature
            ``(query: str, profile: UserProfile | None = None) -> RetrievalContext``,
            typically :meth:`ChatEngine.retrieve_context`.
        tracer: OTel tracer to use for span creation.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(query: str, *args, **kwargs) -> RetrievalContext:
        with tracer.start_as_current_span("retrieval") as span:
            span.set_attribute(ATTR_INPUT_VALUE, query)
            try:
                context = retriever(query, *args, **kwargs)
                span.set_attribute(ATTR_RETRIEVAL_DOCUMENTS, len(context.relevant_docs))
                span.set_attribute(ATTR_RETRIEVAL_MODE, retrieval_mode(context))
                span.set_status(trace.StatusCode.OK)
                return context
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise

    return _wrapped


def traced_synthesis(
    synthesize_fn: Callable[..., Answer],
    tracer: trace.Tracer,
) -> Callable[..., Answer]:
    """Wrap an answer synthesizer so every call is recorded as a ``"synthesis"`` span.

    The span records the query, the first 500 characters of the answer text
    and whether the answer was drawn from the corpus.
    """

    def _wrapped(query: str, context: RetrievalContext, *args, **kwargs) -> Answer:
        with tracer.start_as_current_span("synthesis") as span:
            span.set_attribute(ATTR_INPUT_VALUE, query)
            try:
                result = synthesize_fn(query, context, *args, **kwargs)
                span.set_attribute(ATTR_OUTPUT_VALUE, result.text[:OUTPUT_PREVIEW_CHARS])
                span.set_attribute(ATTR_FROM_KNOWLEDGE_BASE, result.is_from_knowledge_base)
                span.set_status(trace.StatusCode.OK)
                return result
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise

    return _wrapped


def build_traced_chat_pipeline(
    engine: ChatEngine,
    tracer: trace.Tracer,
) -> Callable[..., Answer]:
    """Run the engine's retrieval and synthesis under one ``"chat-pipeline"`` span.

    Args:
        engine: Engine whose ``retrieve_context`` and ``synthesize`` are traced.
        tracer: OTel tracer shared by the parent and child spans.

    Returns:
        A callable ``(query, profile=None) -> Answer``. Empty queries are
        answered by :meth:`ChatEngine.answer` directly, without child spans.

    Example::

        pipeline = build_traced_chat_pipeline(engine, get_tracer("support-rag"))
        result = pipeline("how many certificates do I have", profile)
    """
    w_retrieve = traced_retrieval(engine.retrieve_context, tracer)
    w_synthesize = traced_synthesis(engine.synthesize, tracer)

    def _pipeline(query: str, profile: UserProfile | None = None) -> Answer:
        with tracer.start_as_current_span("chat-pipeline") as span:
            span.set_attribute(ATTR_INPUT_VALUE, query)
            if not query or not query.strip():
                result = engine.answer(query, profile)
            else:
                context = w_retrieve(query, profile)
                result = w_synthesize(query, context, profile)
                engine.pause()
            span.set_attribute(ATTR_OUTPUT_VALUE, result.text[:OUTPUT_PREVIEW_CHARS])
            return result

    return _pipeline
