"""API: camada de borda e adapters externos.

Responsabilidades:
- Receber requests HTTP (items, events, webhook)
- Validar assinaturas e payloads de webhook
- Consultar o Notion e normalizar registros para modelos internos

Subpastas:
- connectors/: clientes HTTP e webhook por fonte externa
- normalizers/: conversão de registros externos → modelos internos
- routes/: endpoints HTTP (items, events, webhook, health)

NÃO PODE conter: estado de subscribers, debounce, regras de fan-out.
"""
