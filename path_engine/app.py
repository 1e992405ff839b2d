import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from path_engine.core.exceptions import PathEngineError
from path_engine.core.shortest_path import compute_all_pairs
from path_engine.services.result_formatter import ResultFormatter
from path_engine.settings import LOG_LEVEL

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes


@app.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'}), 200


@app.route('/floyd-warshall', methods=['POST'])
def floyd_warshall():
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'error': 'No input data provided'}), 400
        if 'vertices' not in data:
            return jsonify({'error': 'Missing required field: vertices'}), 400
        if 'matrix' not in data:
            return jsonify({'error': 'Missing required field: matrix'}), 400

        vertices = data['vertices']
        matrix = data['matrix']

        # Validate input formats
        if isinstance(vertices, bool) or not isinstance(vertices, int):
            return jsonify({'error': 'Vertices must be an integer'}), 400
        if not isinstance(matrix, list):
            return jsonify({'error': 'Matrix must be a list of rows'}), 400

        strict = data.get('strict')
        if strict is not None and not isinstance(strict, bool):
            return jsonify({'error': 'Strict must be a boolean'}), 400
        one_based = data.get('one_based')
        if one_based is not None and not isinstance(one_based, bool):
            return jsonify({'error': 'One_based must be a boolean'}), 400

        result = compute_all_pairs(vertices, matrix, strict=strict)
        return jsonify(ResultFormatter.format_result(result, one_based=one_based)), 200

    except PathEngineError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("Unexpected failure computing shortest paths")
        return jsonify({'error': f'Internal server error: {str(e)}'}), 500


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL)
    app.run(host='0.0.0.0', port=5000)
