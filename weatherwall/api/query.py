"""
Query API endpoints - used by weather clients.

Provides endpoints for:
- GET /query/ping - Usage statistics (datasize, iata_freq, radius_freq)
- GET /query/weather/<iata> - Weather at one airport
- GET /query/weather/<iata>/<radius> - Weather within radius km of an airport
"""

import logging
import time

from flask import Blueprint, current_app, jsonify

from weatherwall.exceptions import AirportNotFoundError

logger = logging.getLogger(__name__)

query_bp = Blueprint('query', __name__, url_prefix='/query')


@query_bp.route('/ping', methods=['GET'])
def ping():
    """
    Service health and usage statistics.

    Returns:
    - datasize: records updated within the freshness window
    - iata_freq: per-airport query share
    - radius_freq: 10-bucket histogram of requested radii
    """
    service = current_app.config['WEATHER_SERVICE']
    return jsonify(service.snapshot().to_dict())


@query_bp.route('/weather/<iata>', defaults={'radius': ''}, methods=['GET'])
@query_bp.route('/weather/<iata>/<radius>', methods=['GET'])
def get_weather(iata: str, radius: str):
    """
    Atmospheric records around an airport.

    A blank or zero radius returns the airport's own record, empty or
    not. A positive radius returns every airport within range that has
    at least one reading.
    """
    start_time = time.perf_counter()
    service = current_app.config['WEATHER_SERVICE']

    try:
        records = service.query(iata, radius)
    except AirportNotFoundError as e:
        return jsonify({'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 422

    query_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f'Weather query {iata} r={radius or 0} took {query_time_ms:.2f}ms')

    return jsonify([r.to_dict() for r in records])
