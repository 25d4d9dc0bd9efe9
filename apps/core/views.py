# apps/core/views.py

import logging

from django.conf import settings
from django.contrib import messages
from django.core.cache import cache
from django.core.paginator import Paginator
from django.db.models import Q
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme

from .auth_service import DadosInvalidos, auth_service
from .forms import LoginForm, UsuarioEmpreendimentoForm, UsuarioForm
from .models import Usuario
from .permissions import requer_permissao
from .utils import normalizar_cpf

logger = logging.getLogger(__name__)


def login_view(request):
    """
    View de login usando serviço encapsulado

    A view só trata HTTP; credenciais e sessão ficam no auth_service.
    """
    if request.user.is_authenticated:
        return redirect('core:home')

    form = LoginForm()

    if request.method == 'POST':
        form = LoginForm(request.POST)

        if form.is_valid():
            sucesso, mensagem, _sessao = auth_service.fazer_login(
                request,
                form.cleaned_data['email'],
                form.cleaned_data['cpf'],
            )

            if sucesso:
                messages.success(request, mensagem)
                next_url = request.GET.get('next')
                if next_url and url_has_allowed_host_and_scheme(next_url, {request.get_host()}):
                    return redirect(next_url)
                return redirect(settings.LOGIN_REDIRECT_URL)

            messages.error(request, mensagem)

    context = {
        'title': 'Login - Painel Metrocasa',
        'form': form,
    }

    return render(request, 'core/login.html', context)


def logout_view(request):
    auth_service.fazer_logout(request)
    messages.info(request, 'Você foi desconectado com sucesso.')
    return redirect('core:login')


def unauthorized_view(request):
    """Página de acesso negado"""
    return render(request, 'core/unauthorized.html', {'title': 'Acesso Negado'}, status=403)


def buscar_clientes(termo=''):
    """Clientes filtrados por nome, email ou CPF"""
    clientes = Usuario.objects.filter(role='customer').order_by('name')

    termo = (termo or '').strip()
    if termo:
        filtro = Q(name__icontains=termo) | Q(email__icontains=termo)
        cpf = normalizar_cpf(termo)
        if cpf:
            filtro |= Q(cpf__contains=cpf)
        clientes = clientes.filter(filtro)

    return clientes


@requer_permissao('USERS')
def home_view(request):
    """
    Lista de clientes com busca e paginação

    Requisições htmx recebem apenas a tabela.
    """
    termo = request.GET.get('q', '')
    paginator = Paginator(buscar_clientes(termo), settings.PAINEL_USUARIOS_POR_PAGINA)
    pagina = paginator.get_page(request.GET.get('page'))

    context = {
        'title': 'Usuários',
        'pagina': pagina,
        'termo': termo,
        'total': paginator.count,
    }

    if request.htmx:
        return render(request, 'core/partials/tabela_usuarios.html', context)

    return render(request, 'core/home.html', context)


@requer_permissao('ADMIN')
def usuario_adicionar(request):
    """Cadastro de usuário com as mesmas regras da API"""
    form = UsuarioForm()

    if request.method == 'POST':
        form = UsuarioForm(request.POST)

        if form.is_valid():
            try:
                usuario = auth_service.criar_usuario(form.cleaned_data)
            except DadosInvalidos as exc:
                messages.error(request, str(exc))
            else:
                messages.success(request, f'Usuário {usuario.name} criado com sucesso!')
                return redirect('core:usuario_visualizar', usuario_id=usuario.id)

    context = {
        'title': 'Novo Usuário',
        'form': form,
    }

    return render(request, 'core/usuario_form.html', context)


@requer_permissao('USERS')
def usuario_visualizar(request, usuario_id):
    """Detalhe do usuário com os empreendimentos vinculados"""
    from apps.empreendimentos.services import empreendimentos_do_usuario

    usuario = get_object_or_404(Usuario, id=usuario_id)

    context = {
        'title': usuario.name,
        'usuario': usuario,
        'vinculos': empreendimentos_do_usuario(usuario),
    }

    return render(request, 'core/usuario_detalhe.html', context)


@requer_permissao('USERS')
def usuario_editar(request, usuario_id):
    """
    Troca o empreendimento vinculado ao cliente

    Só o primeiro vínculo é alterado; os demais campos
    da venda (obra_ven, status_ven, empresa_ven) são mantidos.
    """
    usuario = get_object_or_404(Usuario, id=usuario_id)
    vinculos = usuario.empreendimentos_vinculados
    atual = vinculos[0] if vinculos else {}

    form = UsuarioEmpreendimentoForm(initial={
        'property_id': atual.get('property_id'),
        'num_ven': atual.get('num_ven', ''),
    })

    if request.method == 'POST':
        form = UsuarioEmpreendimentoForm(request.POST)

        if form.is_valid():
            novo = dict(atual)
            novo['property_id'] = form.cleaned_data['property_id']
            if form.cleaned_data['num_ven']:
                novo['num_ven'] = form.cleaned_data['num_ven']

            metadata = dict(usuario.metadata or {})
            metadata['properties'] = [novo] + vinculos[1:]
            usuario.metadata = metadata
            usuario.save(update_fields=['metadata', 'updated_at'])

            logger.info("Vínculo de %s alterado por %s", usuario.email, request.user.email)
            messages.success(request, 'Empreendimento atualizado com sucesso!')
            return redirect('core:usuario_visualizar', usuario_id=usuario.id)

    context = {
        'title': f'Editar {usuario.name}',
        'usuario': usuario,
        'form': form,
    }

    return render(request, 'core/usuario_editar.html', context)


def health_check(request):
    """
    Health check para monitoramento
    """
    try:
        Usuario.objects.exists()

        cache.set('health_check', 'ok', 60)
        cache.get('health_check')

        status = {
            'status': 'healthy',
            'database': 'ok',
            'cache': 'ok',
            'timestamp': timezone.now().isoformat(),
        }

        return JsonResponse(status)

    except Exception as e:
        logger.exception("Health check falhou")
        status = {
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': timezone.now().isoformat(),
        }

        return JsonResponse(status, status=500)
