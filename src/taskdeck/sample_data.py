"""Sample tasks for seeding an empty store."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .models import Category, Priority, Task, TaskStatus
from .utils import generate_task_id, now_utc

if TYPE_CHECKING:
    from .repositories import StorageProtocol

logger = logging.getLogger(__name__)


def create_sample_tasks(now: datetime | None = None) -> list[Task]:
    """Build the sample task set, with dates relative to ``now``."""
    now = now or now_utc()

    def ago(**kwargs) -> datetime:
        return now - timedelta(**kwargs)

    tomorrow = now + timedelta(days=1)
    next_week = now + timedelta(days=7)

    entries = [
        dict(
            title="Revisar y responder emails importantes",
            description=(
                "Revisar la bandeja de entrada y responder a los emails más importantes "
                "del día. Priorizar clientes y proveedores."
            ),
            status=TaskStatus.PENDING,
            priority=Priority.HIGH,
            category=Category.WORK,
            due_date=tomorrow,
            created_at=ago(hours=2),
            updated_at=ago(hours=1),
            tags=["comunicación", "emails", "urgente"],
            assigned_to="Juan Pérez",
        ),
        dict(
            title="Completar presentación para el cliente",
            description=(
                "Finalizar las últimas diapositivas de la presentación para la reunión "
                "del viernes. Incluir gráficos de resultados y propuestas."
            ),
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.URGENT,
            category=Category.WORK,
            due_date=next_week,
            created_at=ago(days=1),
            updated_at=ago(minutes=30),
            tags=["presentación", "cliente", "diseño"],
            assigned_to="María García",
        ),
        dict(
            title="Comprar ingredientes para la cena",
            description=(
                "Lista de compras: tomates, cebolla, ajo, pasta, queso parmesano, "
                "aceite de oliva, y hierbas frescas."
            ),
            status=TaskStatus.PENDING,
            priority=Priority.MEDIUM,
            category=Category.SHOPPING,
            due_date=tomorrow,
            created_at=ago(hours=3),
            updated_at=ago(hours=3),
            tags=["comida", "supermercado", "cena"],
        ),
        dict(
            title="Ejercicio cardiovascular - 45 minutos",
            description=(
                "Sesión de cardio en el gimnasio: 20 minutos en cinta, 15 minutos en "
                "bicicleta elíptica, 10 minutos de enfriamiento."
            ),
            status=TaskStatus.COMPLETED,
            priority=Priority.MEDIUM,
            category=Category.HEALTH,
            due_date=ago(days=7),
            created_at=ago(days=7),
            updated_at=ago(days=6),
            tags=["ejercicio", "gimnasio", "salud"],
        ),
        dict(
            title="Estudiar capítulo 5 de React",
            description=(
                "Leer y practicar los ejercicios del capítulo sobre hooks avanzados: "
                "useReducer, useContext, y custom hooks."
            ),
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.HIGH,
            category=Category.EDUCATION,
            due_date=next_week,
            created_at=ago(hours=12),
            updated_at=ago(hours=2),
            tags=["programación", "react", "hooks", "aprendizaje"],
            assigned_to="Carlos Rodríguez",
        ),
        dict(
            title="Llamar al dentista para cita",
            description=(
                "Programar limpieza dental semestral. Preguntar sobre disponibilidad "
                "para la próxima semana."
            ),
            status=TaskStatus.PENDING,
            priority=Priority.LOW,
            category=Category.HEALTH,
            created_at=ago(hours=4),
            updated_at=ago(hours=4),
            tags=["salud", "dental", "cita"],
        ),
        dict(
            title="Organizar escritorio de trabajo",
            description=(
                "Limpiar y organizar el espacio de trabajo: clasificar documentos, "
                "ordenar cajones, limpiar pantalla y teclado."
            ),
            status=TaskStatus.COMPLETED,
            priority=Priority.LOW,
            category=Category.PERSONAL,
            created_at=ago(days=2),
            updated_at=ago(days=1),
            tags=["organización", "limpieza", "productividad"],
        ),
        dict(
            title="Revisar facturas pendientes",
            description=(
                "Verificar y procesar las facturas del mes. Marcar las que están "
                "próximas a vencer y programar pagos."
            ),
            status=TaskStatus.PENDING,
            priority=Priority.URGENT,
            category=Category.WORK,
            due_date=ago(days=1),  # overdue since yesterday
            created_at=ago(days=5),
            updated_at=ago(days=5),
            tags=["finanzas", "facturas", "pagos", "vencida"],
            assigned_to="Ana López",
        ),
        dict(
            title="Planificar viaje de fin de semana",
            description=(
                "Investigar destinos cercanos, revisar el clima, hacer reservas de "
                "hotel y planificar actividades."
            ),
            status=TaskStatus.PENDING,
            priority=Priority.LOW,
            category=Category.PERSONAL,
            due_date=next_week,
            created_at=ago(hours=6),
            updated_at=ago(hours=6),
            tags=["viaje", "planificación", "fin de semana", "reservas"],
        ),
        dict(
            title="Actualizar portfolio personal",
            description=(
                "Agregar los últimos proyectos completados, actualizar la sección de "
                "habilidades y mejorar el diseño responsive."
            ),
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.MEDIUM,
            category=Category.WORK,
            due_date=next_week,
            created_at=ago(days=3),
            updated_at=ago(hours=1),
            tags=["portfolio", "diseño web", "proyectos", "responsive"],
        ),
    ]

    tasks: list[Task] = []
    used: set[str] = set()
    for order, fields in enumerate(entries):
        task_id = generate_task_id(fields["title"], used)
        used.add(task_id)
        tasks.append(Task(id=task_id, order=order, **fields))
    return tasks


def seed_if_empty(repository: StorageProtocol, now: datetime | None = None) -> list[Task] | None:
    """
    Save the sample tasks when the repository holds no tasks.

    Returns:
        The seeded tasks, or None if the repository already had tasks.
    """
    if repository.load_tasks():
        return None

    tasks = create_sample_tasks(now)
    repository.save_tasks(tasks)
    logger.info("Seeded %d sample tasks", len(tasks))
    return tasks
