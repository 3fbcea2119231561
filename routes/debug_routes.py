from flask import jsonify


def register_debug_routes(app):
    """Register debug and maintenance endpoints."""

    @app.route("/debug")
    def debug():
        """Debug endpoint with converter statistics."""
        from services.radar_service import RadarService
        radar_service = RadarService.get_instance()

        return jsonify(radar_service.get_stats() if radar_service else {})

    @app.route("/debug/reset", methods=["POST"])
    def reset_state():
        """Clear converter counters and latest state."""
        from services.radar_service import RadarService
        radar_service = RadarService.get_instance()

        try:
            radar_service.reset()
            return jsonify({
                "success": True,
                "message": "Radar service state cleared"
            })
        except Exception as e:
            return jsonify({
                "success": False,
                "message": f"Reset failed: {str(e)}"
            }), 500
