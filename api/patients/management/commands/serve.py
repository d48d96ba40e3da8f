# api/patients/management/commands/serve.py
import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import DatabaseError, connections

logger = logging.getLogger('api.patients')


class Command(BaseCommand):
    help = 'Verifica la conexión al almacenamiento e inicia el servidor en PORT'

    def add_arguments(self, parser):
        parser.add_argument('--host', default='0.0.0.0', help='Interfaz de escucha')
        parser.add_argument('--port', type=int, default=None, help='Puerto (por defecto settings.PORT)')
        parser.add_argument(
            '--check-only', action='store_true',
            help='Solo verificar la conexión, sin iniciar el servidor'
        )

    def handle(self, *args, **options):
        conectado = self.verificar_almacenamiento()
        if options['check_only']:
            return

        if not conectado:
            # El servidor arranca igual; las operaciones fallarán hasta que vuelva la conexión
            self.stdout.write(self.style.WARNING('⚠️ Iniciando sin conexión al almacenamiento'))

        port = options['port'] or settings.PORT
        logger.info(f"Servidor corriendo en http://{options['host']}:{port}")
        call_command('runserver', f"{options['host']}:{port}", use_reloader=False)

    def verificar_almacenamiento(self):
        try:
            connections['default'].ensure_connection()
        except DatabaseError as e:
            logger.error(f"Error de conexión al almacenamiento: {e}")
            return False
        logger.info('Conectado al almacenamiento de pacientes')
        self.stdout.write(self.style.SUCCESS('✅ Conectado al almacenamiento de pacientes'))
        return True
