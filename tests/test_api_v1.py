"""
Tests for v1 Checkout API.
"""
import json

import pytest


@pytest.mark.api
class TestCheckoutAPI:
    """Test POST /api/v1/checkout."""

    def test_create_checkout_success(self, client, liqpay, payload):
        response = client.post(
            '/api/v1/checkout',
            data=json.dumps(payload),
            headers={'Content-Type': 'application/json'}
        )

        assert response.status_code == 200
        data = response.get_json()
        expected = liqpay.build_signed_request(payload)
        assert data['data'] == expected.data
        assert data['signature'] == expected.signature
        assert data['checkout_url'] == 'https://www.liqpay.ua/api/3/checkout'

        assert 'X-Request-ID' in response.headers

    def test_request_id_echoed(self, client, payload):
        response = client.post(
            '/api/v1/checkout',
            json=payload,
            headers={'X-Request-ID': 'req-123'}
        )

        assert response.headers['X-Request-ID'] == 'req-123'

    def test_missing_field(self, client, payload):
        del payload['amount']
        del payload['currency']

        response = client.post('/api/v1/checkout', json=payload)

        assert response.status_code == 400
        data = response.get_json()
        assert data['error']['code'] == 'missing_parameter'
        assert data['error']['details'] == {'field': 'amount'}
        assert 'request_id' in data['error']

    def test_invalid_field(self, client, payload):
        payload['currency'] = 'XYZ'

        response = client.post('/api/v1/checkout', json=payload)

        assert response.status_code == 400
        data = response.get_json()
        assert data['error']['code'] == 'invalid_parameter'
        assert data['error']['details'] == {'field': 'currency'}

    def test_body_must_be_json_object(self, client):
        response = client.post(
            '/api/v1/checkout',
            data='not json',
            headers={'Content-Type': 'application/json'}
        )

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'invalid_request'

    def test_json_array_rejected(self, client):
        response = client.post('/api/v1/checkout', json=[1, 2])

        assert response.status_code == 400
        error = response.get_json()['error']
        assert error['code'] == 'invalid_request'
        assert 'details' in error
        assert error['details'] is None

    def test_lone_surrogate_in_body(self, client, payload):
        body = json.dumps(dict(payload, description='Order \ud800'))
        assert '\\ud800' in body

        response = client.post(
            '/api/v1/checkout',
            data=body,
            headers={'Content-Type': 'application/json'}
        )

        assert response.status_code == 200
        data = response.get_json()
        params = client.application.extensions['liqpay'].decode_data(data['data'])
        assert params['description'] == 'Order \ufffd'

    def test_sandbox_config(self, make_app, payload):
        app = make_app(LIQPAY_SANDBOX=True, LIQPAY_API_VERSION='4')

        response = app.test_client().post('/api/v1/checkout', json=payload)

        data = response.get_json()
        params = app.extensions['liqpay'].decode_data(data['data'])
        assert params['sandbox'] == '1'
        assert params['version'] == '4'
        assert data['checkout_url'] == 'https://www.liqpay.ua/api/4/checkout'

    def test_cors_headers(self, client, payload):
        response = client.post(
            '/api/v1/checkout',
            json=payload,
            headers={'Origin': 'https://shop.example.com'}
        )

        assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'https://shop.example.com')

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get('/api/v1/unknown')

        assert response.status_code == 404
        data = response.get_json()
        assert data['error']['code'] == 'not_found'
        assert 'request_id' in data['error']

    def test_wrong_method(self, client):
        response = client.get('/api/v1/checkout')

        assert response.status_code == 405
        assert response.get_json()['error']['code'] == 'method_not_allowed'
