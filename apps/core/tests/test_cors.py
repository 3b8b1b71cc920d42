"""
Tests for the origin policy.

The default configuration is log-only: origins outside the allow-list are
reported but still permitted. These tests pin that down so tightening the
policy is a deliberate change.
"""
from django.test import SimpleTestCase, TestCase, override_settings

from apps.core.cors import OriginDecision, evaluate_origin


class EvaluateOriginTest(SimpleTestCase):

    def test_missing_origin_is_allowed(self):
        self.assertIs(evaluate_origin(None), OriginDecision.ALLOW)
        self.assertIs(evaluate_origin(''), OriginDecision.ALLOW)

    def test_literal_origins(self):
        for origin in [
            'http://localhost:3000',
            'http://localhost:8080',
            'http://localhost:5500',
            'http://127.0.0.1:5500',
        ]:
            self.assertIs(evaluate_origin(origin), OriginDecision.ALLOW, origin)

    def test_railway_subdomains(self):
        self.assertIs(evaluate_origin('https://taskboard.up.railway.app'), OriginDecision.ALLOW)
        self.assertIs(evaluate_origin('https://frontend-production.railway.app'), OriginDecision.ALLOW)

    def test_unlisted_origins_are_denied(self):
        self.assertIs(evaluate_origin('http://evil.example'), OriginDecision.DENY)
        self.assertIs(evaluate_origin('https://railway.app.evil.example'), OriginDecision.DENY)
        self.assertIs(evaluate_origin('http://localhost:3001'), OriginDecision.DENY)

    def test_explicit_lists(self):
        self.assertIs(
            evaluate_origin('https://app.example.com', ['https://app.example.com'], []),
            OriginDecision.ALLOW,
        )
        self.assertIs(
            evaluate_origin('http://localhost:3000', [], [r'^https://']),
            OriginDecision.DENY,
        )


class CorsHeadersTest(TestCase):

    def test_allowed_origin_is_reflected(self):
        response = self.client.get('/api/health', HTTP_ORIGIN='http://localhost:3000')

        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:3000')
        self.assertEqual(response['Access-Control-Allow-Credentials'], 'true')

    def test_unlisted_origin_is_permitted_in_log_only_mode(self):
        with self.assertLogs('apps.core.signals', level='WARNING') as logs:
            response = self.client.get('/api/tasks', HTTP_ORIGIN='http://evil.example')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://evil.example')
        self.assertIn('http://evil.example', logs.output[0])

    @override_settings(CORS_ENFORCE_ORIGINS=True)
    def test_unlisted_origin_is_rejected_when_enforcing(self):
        response = self.client.get('/api/tasks', HTTP_ORIGIN='http://evil.example')

        self.assertNotIn('Access-Control-Allow-Origin', response)

    @override_settings(CORS_ENFORCE_ORIGINS=True)
    def test_allowed_origin_still_works_when_enforcing(self):
        response = self.client.get('/api/tasks', HTTP_ORIGIN='https://web.up.railway.app')

        self.assertEqual(response['Access-Control-Allow-Origin'], 'https://web.up.railway.app')

    def test_preflight(self):
        response = self.client.options(
            '/api/tasks',
            HTTP_ORIGIN='http://localhost:5500',
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        self.assertEqual(response.status_code, 200)
        methods = response['Access-Control-Allow-Methods']
        for method in ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']:
            self.assertIn(method, methods)
        headers = response['Access-Control-Allow-Headers'].lower()
        self.assertIn('content-type', headers)
        self.assertIn('authorization', headers)

    def test_no_origin_no_cors_headers(self):
        response = self.client.get('/api/tasks')

        self.assertEqual(response.status_code, 200)
        self.assertNotIn('Access-Control-Allow-Origin', response)
