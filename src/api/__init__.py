"""API — camada de borda do adaptador de ações.

Responsabilidades:
- Ler parâmetros brutos vindos da camada de agentes
- Validar campos obrigatórios e tipos primitivos
- Normalizar para requisições canônicas do provider

Subpastas:
- normalizers/: leitura tipada de parâmetros e normalizers por canal

NÃO PODE conter: resolução de contas, gates de ação, chamadas ao provider.
"""
