# src/column_resolver/core/config/errors.py
"""
Exceções canônicas da camada de configuração do column_resolver.

Estas exceções cobrem apenas o lado *produtor* da configuração: leitura de
arquivos de grid config e serialização do mapeamento de colunas para o blob
JSON consumido pelo loader de colunas.

O resolver de colunas em si nunca levanta estas exceções: configurações
malformadas que chegam como blob são degradadas para um mapeamento vazio
e registradas no `LoadContext`.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de renderização ou de valor de célula
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do grid.

    Permite captura genérica de falhas de carregamento, merge e
    serialização de configuração.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O loader não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    (ou de uma de suas seções obrigatórias) não é um dicionário.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    estrito de arquivos de configuração.

    Exemplo de conflito:
        - base:     {"policy": {"disabled": false}}
        - override: {"policy": "READ_ONLY"}

    Limites explícitos:
        - Só ocorre no merge estrito (arquivos defaults + local)
        - O merge de `type_config` sobre opções de tipo é leniente e nunca
          levanta esta exceção
    """


class InvalidColumnConfigError(ConfigError):
    """
    Exceção levantada ao serializar um mapeamento de colunas inválido.

    Casos cobertos:
        - chave que não é `str` nem `int` não-negativo
        - registro de override que não é um dicionário
        - `width` que não é um tamanho nomeado nem um número

    Limites explícitos:
        - Não é levantada pelo resolver ao ler o blob serializado
    """
