from flask import Flask, request, jsonify, g
from loaders.config import SPECS_PATH, MODELS_PATH
from services import SpecService, CatalogReadError

app = Flask(__name__)
app.config['SPECS_PATH'] = SPECS_PATH
app.config['MODELS_PATH'] = MODELS_PATH


@app.before_request
def get_spec_service():
    if 'specs' not in g:
        g.specs = SpecService(app.config['SPECS_PATH'], app.config['MODELS_PATH'])


def get_service():
    return g.specs


@app.errorhandler(CatalogReadError)
def catalog_unreadable(e):
    return jsonify({'error': str(e)}), 500


@app.route('/api/specs')
def api_specs():
    model = request.args.get('model', 'all')
    category = request.args.get('category', 'all')
    specs = get_service().list_specs(model=model, category=category)
    return jsonify({'specs': specs})


@app.route('/api/models')
def api_models():
    return jsonify(get_service().list_models())


if __name__ == '__main__':
    app.run(debug=True, port=5000)
