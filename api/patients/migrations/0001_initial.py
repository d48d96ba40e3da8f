import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Paciente',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True)),
                ('fecha_creacion', models.DateTimeField(auto_now_add=True, verbose_name='Fecha de creación')),
                ('fecha_modificacion', models.DateTimeField(auto_now=True, verbose_name='Fecha de modificación')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre completo')),
                ('correo', models.CharField(blank=True, max_length=255, null=True, verbose_name='Correo electrónico')),
                ('celular', models.CharField(blank=True, max_length=50, null=True, verbose_name='Celular')),
                ('edad', models.CharField(blank=True, max_length=50, null=True, verbose_name='Edad')),
                ('doctor', models.CharField(blank=True, max_length=255, null=True, verbose_name='Credenciales del doctor')),
                ('fecha', models.CharField(blank=True, max_length=50, null=True, verbose_name='Fecha')),
                ('tratamientos', models.JSONField(blank=True, default=list, verbose_name='Tratamientos')),
                ('historia_clinica', models.JSONField(blank=True, null=True, verbose_name='Historia clínica')),
            ],
            options={
                'verbose_name': 'Paciente',
                'verbose_name_plural': 'Pacientes',
                'ordering': ['fecha_creacion'],
            },
        ),
    ]
