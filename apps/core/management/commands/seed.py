# apps/core/management/commands/seed.py

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.core.auth_service import DadosInvalidos, auth_service
from apps.core.models import Usuario
from apps.empreendimentos.models import Empreendimento

EMPREENDIMENTOS_DEMO = [
    {
        'title': 'Metrocasa Ipiranga',
        'project_status': 'under_construction',
        'address': {'street': 'Rua Bom Pastor', 'number': '1200', 'neighborhood': 'Ipiranga',
                    'city': 'São Paulo', 'state': 'SP'},
        'project_evolution': {'project_percentage': 45, 'demolition': 100, 'earthworks': 100,
                              'shallow_foundation': 100, 'deep_foundation': 80, 'structure': 30,
                              'finishing': 0, 'enclosure': 0, 'project_pdf': ''},
    },
    {
        'title': 'Metrocasa Vila Prudente',
        'project_status': 'launch',
        'address': {'street': 'Avenida Paes de Barros', 'number': '3300', 'neighborhood': 'Mooca',
                    'city': 'São Paulo', 'state': 'SP'},
    },
    {
        'title': 'Metrocasa Tatuapé',
        'project_status': 'ready_to_move_in',
        'address': {'street': 'Rua Tuiuti', 'number': '500', 'neighborhood': 'Tatuapé',
                    'city': 'São Paulo', 'state': 'SP'},
        'metadata': {'tour': ''},
    },
]


class Command(BaseCommand):
    help = 'Cria o administrador inicial e empreendimentos de demonstração'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Email do administrador')
        parser.add_argument('--cpf', required=True, help='CPF do administrador')
        parser.add_argument('--nome', default='Administrador', help='Nome do administrador')
        parser.add_argument(
            '--sem-demo', action='store_true',
            help='Não cria empreendimentos de demonstração'
        )

    def handle(self, *args, **options):
        self.stdout.write('🌱 Populando o painel...')

        with transaction.atomic():
            self._criar_admin(options)

            if not options['sem_demo']:
                self._criar_empreendimentos()

        self.stdout.write(self.style.SUCCESS('✅ Seed concluído!'))

    def _criar_admin(self, options):
        if Usuario.objects.filter(email=options['email']).exists():
            self.stdout.write(f"  ↪ Administrador {options['email']} já existe")
            return

        try:
            usuario = auth_service.criar_usuario({
                'name': options['nome'],
                'email': options['email'],
                'cpf': options['cpf'],
                'role': 'admin',
            })
        except DadosInvalidos as exc:
            raise CommandError(f'Não foi possível criar o administrador: {exc}')

        self.stdout.write(f'  ✅ Administrador criado: {usuario.email}')

    def _criar_empreendimentos(self):
        for dados in EMPREENDIMENTOS_DEMO:
            dados = dict(dados)
            empreendimento, criado = Empreendimento.objects.get_or_create(title=dados.pop('title'), defaults=dados)
            if criado:
                self.stdout.write(f"  ✅ Empreendimento criado: {empreendimento.title}")
