"""Static schema descriptions for the built-in context tables.

Documentation only: stored entries are never validated against these.
"""

TABLE_SCHEMAS: dict[str, dict] = {
    "feedback_context": {
        "primaryKey": "id",
        "fields": {
            "id": "string",
            "teamId": "string",
            "text": "string",
            "originalText": "string",
            "language": "string",
            "sentiment": "string",
            "culturalNotes": "string",
            "summary": "string",
            "rating": "number",
            "isResolved": "boolean",
            "streamSource": "string",
            "customer": "object",
            "createdAt": "datetime",
        },
    },
    "cultural_insights": {
        "primaryKey": "id",
        "fields": {
            "id": "string",
            "teamId": "string",
            "language": "string",
            "region": "string",
            "insightType": "string",
            "insight": "string",
            "confidence": "number",
            "feedbackCount": "number",
            "createdAt": "datetime",
        },
    },
    "team_stats": {
        "primaryKey": "teamId",
        "fields": {
            "teamId": "string",
            "teamName": "string",
            "totalFeedback": "number",
            "sentimentBreakdown": "object",
            "languageBreakdown": "object",
            "averageRating": "number",
            "resolvedCount": "number",
            "streamingCount": "number",
            "lastUpdated": "datetime",
        },
    },
    "anomaly_alerts": {
        "primaryKey": "id",
        "fields": {
            "id": "string",
            "teamId": "string",
            "anomalyType": "string",
            "severity": "string",
            "reasoning": "string",
            "feedbackId": "string",
            "status": "string",
            "createdAt": "datetime",
        },
    },
}
