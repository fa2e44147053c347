"""App — orquestração do adaptador de ações de canal.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- coordinators/: adaptadores por provider (listagem, dispatch)
- services/: gates de ação, contas, capacidades e extração de intenção
- protocols/: contratos/interfaces e requisições canônicas
- observability/: correlation_id e métricas via logs estruturados
- constants/: enums de ações e origens de token

Padrão: app executa; api normaliza; config configura; utils apoia.
"""
