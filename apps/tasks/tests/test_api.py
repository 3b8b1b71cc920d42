"""
Integration tests for /api/tasks endpoints.
Tests status codes, validation and end-to-end CRUD flows.
"""
import json
from urllib.parse import urlencode
from django.test import TestCase, Client

from apps.tasks.models import Task, TaskStatus, TaskPriority


class TaskAPITest(TestCase):
    """Test task CRUD endpoints against the ORM store."""

    def setUp(self):
        self.client = Client()
        self.task = Task.objects.create(
            title='Existing task',
            description='Already on the board',
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.HIGH,
        )

    def post_json(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type='application/json')

    def put_json(self, url, payload):
        return self.client.put(url, data=json.dumps(payload), content_type='application/json')

    def test_list_tasks(self):
        response = self.client.get('/api/tasks')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]['id'], self.task.id)
        self.assertEqual(data[0]['status'], 'IN_PROGRESS')

    def test_list_tasks_filtered_by_status(self):
        Task.objects.create(title='Done already', status=TaskStatus.DONE)

        response = self.client.get('/api/tasks', {'status': 'DONE'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([t['title'] for t in response.json()], ['Done already'])

    def test_list_tasks_rejects_unknown_status_filter(self):
        response = self.client.get('/api/tasks', {'status': 'LATER'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Validation Error')

    def test_get_task(self):
        response = self.client.get(f'/api/tasks/{self.task.id}')
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['title'], 'Existing task')
        self.assertEqual(data['description'], 'Already on the board')
        self.assertEqual(data['priority'], 'HIGH')
        self.assertIn('created_at', data)
        self.assertIn('updated_at', data)

    def test_get_missing_task(self):
        response = self.client.get('/api/tasks/999999')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Task not found'})

    def test_non_numeric_id_is_not_found(self):
        response = self.client.get('/api/tasks/abc')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Not Found'})

    def test_create_task(self):
        response = self.post_json('/api/tasks', {
            'title': 'Ship release',
            'description': 'Tag and publish',
            'status': 'IN_PROGRESS',
            'priority': 'LOW',
        })
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data['title'], 'Ship release')
        self.assertEqual(data['status'], 'IN_PROGRESS')
        self.assertEqual(data['priority'], 'LOW')
        self.assertTrue(Task.objects.filter(pk=data['id']).exists())

    def test_create_without_status_defaults_to_todo(self):
        response = self.post_json('/api/tasks', {'title': 'Buy milk'})
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data['status'], 'TODO')
        self.assertEqual(data['priority'], 'MEDIUM')
        self.assertEqual(data['description'], '')

    def test_create_then_get_round_trip(self):
        created = self.post_json('/api/tasks', {'title': 'Call plumber', 'description': 'Kitchen sink'}).json()

        fetched = self.client.get(f"/api/tasks/{created['id']}").json()
        self.assertEqual(fetched, created)

    def test_create_requires_title(self):
        response = self.post_json('/api/tasks', {'description': 'No title'})
        self.assertEqual(response.status_code, 400)

        data = response.json()
        self.assertEqual(data['error'], 'Validation Error')
        self.assertTrue(any('title' in detail['loc'] for detail in data['details']))

    def test_create_rejects_blank_title(self):
        response = self.post_json('/api/tasks', {'title': '   '})
        self.assertEqual(response.status_code, 400)

    def test_create_rejects_long_title(self):
        response = self.post_json('/api/tasks', {'title': 'x' * 201})
        self.assertEqual(response.status_code, 400)

    def test_create_rejects_unknown_status(self):
        response = self.post_json('/api/tasks', {'title': 'Bad', 'status': 'SOMEDAY'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Task.objects.count(), 1)

    def test_create_rejects_malformed_json(self):
        response = self.client.post('/api/tasks', data='{"title": ', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.json())

    def test_create_from_html_form(self):
        response = self.client.post('/api/tasks', data={'title': 'Buy milk'})
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data['title'], 'Buy milk')
        self.assertEqual(data['status'], 'TODO')

    def test_create_from_urlencoded_body(self):
        response = self.client.post(
            '/api/tasks',
            data=urlencode({'title': 'Water plants', 'priority': 'HIGH'}),
            content_type='application/x-www-form-urlencoded',
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['priority'], 'HIGH')

    def test_create_from_form_still_validates(self):
        response = self.client.post('/api/tasks', data={'title': 'Bad', 'status': 'SOMEDAY'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Validation Error')

    def test_update_from_urlencoded_body(self):
        response = self.client.put(
            f'/api/tasks/{self.task.id}',
            data=urlencode({'status': 'DONE'}),
            content_type='application/x-www-form-urlencoded',
        )
        self.assertEqual(response.status_code, 200)

        self.task.refresh_from_db()
        self.assertEqual(self.task.status, TaskStatus.DONE)
        self.assertEqual(self.task.title, 'Existing task')

    def test_update_task(self):
        response = self.put_json(f'/api/tasks/{self.task.id}', {'status': 'DONE'})
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertEqual(data['status'], 'DONE')
        self.assertEqual(data['title'], 'Existing task')

        self.task.refresh_from_db()
        self.assertEqual(self.task.status, TaskStatus.DONE)

    def test_update_full_replacement(self):
        response = self.put_json(f'/api/tasks/{self.task.id}', {
            'title': 'Renamed',
            'description': 'New text',
            'status': 'TODO',
            'priority': 'LOW',
        })
        self.assertEqual(response.status_code, 200)

        self.task.refresh_from_db()
        self.assertEqual(self.task.title, 'Renamed')
        self.assertEqual(self.task.description, 'New text')
        self.assertEqual(self.task.priority, TaskPriority.LOW)

    def test_update_rejects_null_title(self):
        response = self.put_json(f'/api/tasks/{self.task.id}', {'title': None})
        self.assertEqual(response.status_code, 400)

        self.task.refresh_from_db()
        self.assertEqual(self.task.title, 'Existing task')

    def test_update_missing_task(self):
        response = self.put_json('/api/tasks/999999', {'title': 'Nope'})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['error'], 'Task not found')

    def test_delete_task(self):
        response = self.client.delete(f'/api/tasks/{self.task.id}')
        self.assertEqual(response.status_code, 204)
        self.assertFalse(Task.objects.filter(pk=self.task.id).exists())

    def test_delete_then_get_is_not_found(self):
        self.client.delete(f'/api/tasks/{self.task.id}')

        self.assertEqual(self.client.get(f'/api/tasks/{self.task.id}').status_code, 404)
        self.assertEqual(self.client.delete(f'/api/tasks/{self.task.id}').status_code, 404)

    def test_delete_missing_task(self):
        response = self.client.delete('/api/tasks/999999')
        self.assertEqual(response.status_code, 404)

    def test_stats(self):
        Task.objects.create(title='Done 1', status=TaskStatus.DONE, priority=TaskPriority.LOW)
        Task.objects.create(title='Todo 1')

        response = self.client.get('/api/tasks/stats')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'total': 3,
            'by_status': {'TODO': 1, 'IN_PROGRESS': 1, 'DONE': 1},
            'by_priority': {'LOW': 1, 'MEDIUM': 1, 'HIGH': 1},
        })
