"""
Collector API endpoints - used by airport weather stations.

Provides endpoints for:
- HEAD/GET /collect/ping - Liveness check
- POST /collect/weather/<iata>/<point_type> - Upload a reading summary
- GET /collect/airports - List known IATA codes
- GET /collect/airport/<iata> - Get a single airport
- POST /collect/airport/<iata>/<lat>/<long> - Register an airport
- DELETE /collect/airport/<iata> - Not supported (501)
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from weatherwall.exceptions import (
    AirportNotFoundError,
    DuplicateCodeError,
    InvalidRangeError,
    UnknownKindError,
)

logger = logging.getLogger(__name__)

collect_bp = Blueprint('collect', __name__, url_prefix='/collect')


def _service():
    return current_app.config['WEATHER_SERVICE']


@collect_bp.route('/ping', methods=['GET', 'HEAD'])
def ping():
    """Liveness check for stations."""
    return jsonify({'status': 'ok'})


@collect_bp.route('/weather/<iata>/<point_type>', methods=['POST'])
def update_weather(iata: str, point_type: str):
    """
    Store one reading for an airport.

    Body: {"mean": float, "min": float, "max": float, "std": float, "count": int}
    Only mean is required.

    Responses:
    - 201 on success
    - 404 if the airport is unknown
    - 422 if the body is malformed, the kind unknown or the mean out of range
    """
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({'error': 'JSON body required'}), 422

    try:
        record = _service().ingest(iata, point_type, data)
    except AirportNotFoundError as e:
        logger.info(f'Reading rejected: {e}')
        return jsonify({'error': str(e)}), 404
    except (UnknownKindError, InvalidRangeError, ValueError) as e:
        logger.info(f'Reading rejected for {iata}/{point_type}: {e}')
        return jsonify({'error': str(e)}), 422

    return jsonify(record.to_dict()), 201


@collect_bp.route('/airports', methods=['GET'])
def list_airports():
    """List all known IATA codes, sorted."""
    codes = sorted(a.iata for a in _service().airports())
    return jsonify(codes)


@collect_bp.route('/airport/<iata>', methods=['GET'])
def get_airport(iata: str):
    """Get a single airport's position."""
    try:
        airport = _service().find_airport(iata)
    except AirportNotFoundError as e:
        return jsonify({'error': str(e)}), 404
    return jsonify(airport.to_dict())


@collect_bp.route('/airport/<iata>/<lat>/<long>', methods=['POST'])
def add_airport(iata: str, lat: str, long: str):
    """
    Register a new airport.

    Responses:
    - 201 with the airport on success
    - 409 if the code is already registered
    - 422 on a malformed code or non-numeric or out-of-range coordinates
    """
    try:
        latitude = float(lat)
        longitude = float(long)
    except ValueError:
        return jsonify({'error': 'Invalid latitude or longitude'}), 422

    try:
        airport = _service().register_airport(iata, latitude, longitude)
    except DuplicateCodeError as e:
        logger.info(str(e))
        return jsonify({'error': str(e)}), 409
    except ValueError as e:
        return jsonify({'error': str(e)}), 422

    logger.info(f'Added airport {airport.iata} at ({latitude}, {longitude})')
    return jsonify(airport.to_dict()), 201


@collect_bp.route('/airport/<iata>', methods=['DELETE'])
def delete_airport(iata: str):
    """Airports cannot be removed once registered."""
    return jsonify({'error': 'Airport deletion is not supported'}), 501
