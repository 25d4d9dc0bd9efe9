#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Painel Metrocasa - Administração de usuários, obras e indicações
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Comandos customizados do Painel
    if len(sys.argv) > 1:
        command = sys.argv[1]

        if command in ('setup', 'backup'):
            import django
            from django.core.management import call_command
            from django.core.management.base import CommandError

            django.setup()

        # Setup inicial: python manage.py setup <email> <cpf>
        if command == 'setup':
            print("🚀 Configurando Painel Metrocasa...")

            print("📊 Aplicando migrações...")
            try:
                call_command('migrate')
            except CommandError as exc:
                print(f"❌ Erro nas migrações: {exc}")
                return

            print("📁 Coletando arquivos estáticos...")
            call_command('collectstatic', interactive=False)

            if len(sys.argv) >= 4:
                email, cpf = sys.argv[2], sys.argv[3]
                print("🌱 Criando administrador e dados demo...")
                try:
                    call_command('seed', email=email, cpf=cpf)
                except CommandError as exc:
                    print(f"❌ Erro ao criar administrador: {exc}")
                    return
                print(f"✅ Setup concluído! Acesse com {email} e o CPF informado")
            else:
                print("⚠️  Setup concluído sem administrador (informe email e CPF)")
            return

        elif command == 'backup':
            print("💾 Criando backup do banco...")
            from datetime import datetime
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            backup_file = f"backup_painel_{timestamp}.json"
            call_command(
                'dumpdata', 'core', 'empreendimentos', 'indicacoes',
                indent=2, output=backup_file
            )
            print(f"✅ Backup criado: {backup_file}")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
