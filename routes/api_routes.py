from flask import jsonify, request
from utils import FormatError


def register_api_routes(app):
    """Register API endpoints."""

    @app.route("/api/convert", methods=["POST"])
    def convert_sentences():
        """Convert radar sentences posted as plain text or as JSON {"lines": [...]}."""
        from services.radar_service import RadarService
        radar_service = RadarService.get_instance()

        if request.is_json:
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return jsonify({
                    "success": False,
                    "message": "JSON body must be an object with a 'lines' list"
                }), 400
            lines = payload.get('lines', [])
            if not isinstance(lines, list):
                return jsonify({
                    "success": False,
                    "message": "'lines' must be a list of sentences"
                }), 400
        else:
            lines = request.get_data(as_text=True).splitlines()

        lines = [str(line).strip() for line in lines if str(line).strip()]
        if not lines:
            return jsonify({
                "success": False,
                "message": "No sentences provided"
            }), 400

        if len(lines) > radar_service.max_lines:
            return jsonify({
                "success": False,
                "message": f"Too many sentences: {len(lines)} (limit {radar_service.max_lines})"
            }), 413

        messages = []
        errors = []
        for line in lines:
            try:
                messages.extend(radar_service.convert_line(line))
            except FormatError as e:
                errors.append({"line": line, "error": str(e)})

        return jsonify({
            "success": not errors,
            "messages": [message.to_dict() for message in messages],
            "errors": errors
        })

    @app.route("/api/targets")
    def get_targets():
        """Return the latest target reports and radar state."""
        from services.radar_service import RadarService
        radar_service = RadarService.get_instance()

        return jsonify({
            "targets": radar_service.get_targets(),
            "radar_state": radar_service.get_radar_state()
        })
