"""
Configuração global dos testes
"""
import os

# Sem agente Datadog local durante os testes
os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "WARNING")
