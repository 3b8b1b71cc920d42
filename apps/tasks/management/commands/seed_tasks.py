from django.core.management.base import BaseCommand
from apps.tasks.models import TaskStatus, TaskPriority
from apps.tasks.store import get_task_store
import random

SAMPLE_TITLES = [
    'Set up project repository',
    'Write API documentation',
    'Configure database backups',
    'Review pull requests',
    'Deploy to staging',
    'Fix CORS configuration',
    'Add health check monitoring',
    'Plan sprint retrospective',
]


class Command(BaseCommand):
    help = 'Seeds the task board with sample tasks for testing.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )
        parser.add_argument(
            '--count',
            type=int,
            default=len(SAMPLE_TITLES),
            help='Number of tasks to create',
        )

    def handle(self, *args, **options):
        store = get_task_store()

        if options['clean']:
            deleted = sum(store.delete_task(task.id) for task in store.list_tasks())
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} existing tasks'))

        self.stdout.write('Generating tasks...')

        for i in range(options['count']):
            title = SAMPLE_TITLES[i % len(SAMPLE_TITLES)]
            if i >= len(SAMPLE_TITLES):
                title = f'{title} ({i // len(SAMPLE_TITLES) + 1})'

            store.create_task({
                'title': title,
                'description': f'Sample task #{i + 1}',
                'status': random.choice(TaskStatus.values),
                'priority': random.choices(TaskPriority.values, weights=[30, 50, 20], k=1)[0],
            })

        self.stdout.write(self.style.SUCCESS(f"Successfully created {options['count']} tasks"))
