import logging

from flask import Flask, jsonify, request

from passbench.errors import ConfigError, EstimationError, GenerationError
from passbench.estimator import TimeEstimator
from passbench.generator import PasswordGenerator
from passbench.password_config import PasswordConfig
from passbench.tasks import validate_custom_range

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _json_object():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("request body must be a JSON object")
    return data


def _flag(data, name, default):
    value = data.get(name, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{name}' must be true or false, got {value!r}")
    return value


@app.route('/')
def home():
    return jsonify({
        "message": "PassBench API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    try:
        data = _json_object()
        config = PasswordConfig.build(
            data.get('length', 16),
            latin=_flag(data, 'latin', True),
            cyrillic=_flag(data, 'cyrillic', False),
            digits=_flag(data, 'digits', True),
            special=_flag(data, 'special', True),
            required=str(data.get('required') or ''),
        )
        password = PasswordGenerator().generate(config)
    except (ConfigError, GenerationError) as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': password, 'length': len(password)})

@app.route('/benchmark', methods=['POST'])
def benchmark_route():
    try:
        data = _json_object()
    except ConfigError as e:
        return jsonify({'error': str(e)}), 400
    mode = data.get('mode', 'quick')
    estimator = TimeEstimator()
    try:
        if mode == 'quick':
            report = estimator.run_quick_test()
        elif mode == 'detailed':
            report = estimator.run_detailed_test()
        elif mode == 'custom':
            try:
                lo, hi, step = int(data['min']), int(data['max']), int(data['step'])
            except (KeyError, TypeError, ValueError):
                return jsonify({'error': "custom mode needs integer 'min', 'max' and 'step'"}), 400
            validate_custom_range(lo, hi, step)
            report = estimator.run_custom_test(lo, hi, step)
        else:
            return jsonify({'error': f"unknown mode {mode!r}"}), 400
    except ConfigError as e:
        return jsonify({'error': str(e)}), 400
    except EstimationError as e:
        logger.error("benchmark failed: %s", e)
        return jsonify({'error': str(e)}), 500
    return jsonify({'mode': mode, 'report': report})

if __name__ == "__main__":
    app.run(debug=True)
