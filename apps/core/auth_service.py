# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula toda lógica de acesso do painel

- Verificação de credenciais (email + CPF)
- Emissão da sessão e do token de serviço usado nas chamadas /api/
- Validação do token de serviço
- Criação de usuários com derivação de role/permissão
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.core.validators import validate_email
from django.utils import timezone
from django.utils.crypto import constant_time_compare, salted_hmac
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_decode, urlsafe_base64_encode

from .models import Usuario
from .permissions import MAPA_ROLES, PainelPermissions, derivar_role
from .utils import normalizar_cpf

logger = logging.getLogger(__name__)

SALT_TOKEN_SERVICO = 'apps.core.auth_service.token_servico'
CHAVE_SESSAO = 'painel'


class TokenServicoInvalido(Exception):
    """Token de serviço ausente, malformado ou recusado"""

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem


class DadosInvalidos(ValueError):
    """Dados de entrada rejeitados na validação"""


@dataclass(frozen=True)
class TokenServico:
    permissao: str
    timestamp: int


def agora_ms() -> int:
    return int(timezone.now().timestamp() * 1000)


def _assinar(permissao: str, timestamp) -> str:
    return salted_hmac(
        SALT_TOKEN_SERVICO,
        f"{permissao}.{timestamp}",
        secret=settings.API_KEY,
        algorithm='sha256',
    ).hexdigest()


def gerar_token_servico(permissao: str, timestamp: Optional[int] = None) -> str:
    """
    Gera o token de serviço: base64url("permissao.timestamp.assinatura")

    A assinatura é um HMAC-SHA256 de "permissao.timestamp" com a API_KEY,
    então a chave nunca viaja dentro do token.
    """
    if not settings.API_KEY:
        raise ImproperlyConfigured('API_KEY não configurada')

    if timestamp is None:
        timestamp = agora_ms()

    conteudo = f"{permissao}.{timestamp}.{_assinar(permissao, timestamp)}"
    return urlsafe_base64_encode(force_bytes(conteudo))


def extrair_bearer(header: Optional[str]) -> str:
    """Extrai o token do header Authorization"""
    if not header or not header.startswith('Bearer '):
        raise TokenServicoInvalido('Token ausente')

    token = header[len('Bearer '):].strip()
    if not token:
        raise TokenServicoInvalido('Token ausente')
    return token


def validar_token_servico(token: str) -> TokenServico:
    """
    Valida o token de serviço

    Exige três partes não vazias, permissão na lista global da API,
    timestamp numérico, assinatura válida para a API_KEY atual e,
    se SERVICE_TOKEN_MAX_AGE > 0, idade dentro do limite.
    """
    if not settings.API_KEY:
        raise TokenServicoInvalido('Token inválido')

    try:
        decodificado = urlsafe_base64_decode(token).decode('utf-8')
    except ValueError:
        raise TokenServicoInvalido('Token malformado')

    partes = decodificado.split('.')
    if len(partes) != 3 or not all(partes):
        raise TokenServicoInvalido('Token inválido')

    permissao, timestamp, assinatura = partes

    if not PainelPermissions.permissao_valida_api(permissao):
        raise TokenServicoInvalido('Token inválido')

    if not (timestamp.isascii() and timestamp.isdigit()):
        raise TokenServicoInvalido('Token inválido')

    if not constant_time_compare(assinatura, _assinar(permissao, timestamp)):
        raise TokenServicoInvalido('Token inválido')

    max_age = settings.SERVICE_TOKEN_MAX_AGE
    if max_age and agora_ms() - int(timestamp) > max_age * 1000:
        raise TokenServicoInvalido('Token inválido')

    return TokenServico(permissao=permissao, timestamp=int(timestamp))


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar acesso ao painel

    As views só lidam com HTTP; regras de credencial, sessão,
    token e cadastro ficam aqui.
    """

    def fazer_login(self, request, email: str, cpf: str) -> Tuple[bool, str, Optional[Dict]]:
        """
        Realiza login por email + CPF

        Returns:
            Tuple[sucesso, mensagem, dados_da_sessao]
        """
        usuario = authenticate(request, email=email, cpf=cpf)

        if usuario is None:
            logger.warning("Tentativa de login falhada para: %s", email)
            return False, "Email ou CPF inválido", None

        login(request, usuario, backend='apps.core.backends.EmailCpfBackend')

        sessao = self.emitir_sessao(usuario)
        request.session[CHAVE_SESSAO] = sessao

        logger.info("Login de %s (permissão: %s)", usuario.email, usuario.permissao or '-')
        return True, f"Bem-vindo, {usuario.get_short_name()}!", sessao

    def fazer_logout(self, request) -> bool:
        """Encerra a sessão; o token de serviço some junto com ela"""
        logout(request)
        return True

    def emitir_sessao(self, usuario: Usuario) -> Dict:
        """
        Monta os dados de sessão do usuário

        Usuários sem permissão válida para a API (ex: clientes)
        recebem service_token nulo.
        """
        timestamp = agora_ms()
        permissao = usuario.permissao

        token = None
        if PainelPermissions.permissao_valida_api(permissao):
            token = gerar_token_servico(permissao, timestamp)

        return {
            'id': str(usuario.id),
            'name': usuario.name,
            'email': usuario.email,
            'cpf': usuario.cpf,
            'role': usuario.role,
            'metadata': usuario.metadata or {},
            'login_timestamp': timestamp,
            'service_token': token,
        }

    def token_da_sessao_valido(self, sessao: Dict) -> bool:
        """
        O token guardado na sessão ainda passa no gate?

        Sessões sem token (clientes) não têm o que renovar.
        """
        token = sessao.get('service_token')
        if token is None:
            return True

        try:
            validar_token_servico(token)
        except TokenServicoInvalido:
            return False
        return True

    def criar_usuario(self, dados: Dict) -> Usuario:
        """
        Cria usuário derivando role e permissão do papel informado

        Levanta DadosInvalidos quando a entrada não passa na validação.
        """
        self._validar_dados_usuario(dados)

        email = Usuario.objects.normalize_email(str(dados['email']).strip())
        if Usuario.objects.filter(email=email).exists():
            raise DadosInvalidos("Email já cadastrado")

        role, metadata = derivar_role(str(dados['role']).strip())

        usuario = Usuario.objects.create_user(
            email=email,
            cpf=normalizar_cpf(dados['cpf']),
            name=str(dados['name']).strip(),
            role=role,
            metadata=metadata,
            email_verified=False,
        )

        logger.info("Usuário %s criado com role %s", usuario.email, usuario.role)
        return usuario

    # =================== MÉTODOS PRIVADOS ===================

    def _validar_dados_usuario(self, dados: Dict):
        """Valida dados de entrada para criação de usuário"""
        campos_obrigatorios = ['name', 'email', 'cpf', 'role']

        for campo in campos_obrigatorios:
            valor = dados.get(campo)
            if valor is None or not str(valor).strip():
                raise DadosInvalidos("Campos obrigatórios faltando")

        if str(dados['role']).strip() not in MAPA_ROLES:
            raise DadosInvalidos("Papel inválido")

        if len(normalizar_cpf(dados['cpf'])) != 11:
            raise DadosInvalidos("CPF inválido")

        try:
            validate_email(str(dados['email']).strip())
        except ValidationError:
            raise DadosInvalidos("Email inválido")


# Instância global do serviço (Singleton pattern)
auth_service = AuthenticationService()
