from flask import Blueprint, jsonify, current_app

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the trivia league server!',
        'store': current_app.config.get('TABULAR_STORE'),
    })
