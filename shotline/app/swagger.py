from shotline import __version__

swagger_config = {
    "headers": [
        ("Access-Control-Allow-Origin", "*"),
        (
            "Access-Control-Allow-Methods",
            "GET, POST, PUT, PATCH, DELETE, OPTIONS",
        ),
        ("Access-Control-Allow-Credentials", "true"),
        (
            "Access-Control-Allow-Headers",
            "Authorization, Origin, X-Requested-With, Content-Type, Accept",
        ),
    ],
    "specs": [{"endpoint": "openapi", "route": "/openapi.json"}],
    "static_url_path": "/docs",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


description = f"""
## Welcome to the Shotline API documentation
```Version: {__version__}```

The Shotline API stores the projects, episodes, sequences, shots and assets
of your animation/VFX productions, with the versions delivered for them, the
review notes left on them and the playlists used to review them. Access to each project is granted per person with
one of three roles: viewer, contributor and owner.

## Authentication<div class="auth">

<p>Before you can use any of the endpoints outline below,
you will have to get a JWT token to authorize your requests.

You can get a authorization token using a POST request to ```/auth/login```.
With curl this would look something like ```curl -X POST <server_address>/auth/login -d "email=<youremail>&password=<yourpassword>```.

The response is a JSON object, specifically you'll need to provide the ```access_token``` for your future requests.

Here is a complete authentication process as an example (again using curl):
```
$ curl -X POST <server_address>/auth/login -d "email=<youremail>&password=<yourpassword>"'
{{"login": true", "access_token": "eyJ0e...", ...}}
$ jwt=eyJ0e...  # Store the access token for easier use
$ curl -H "Authorization: Bearer $jwt" <server_address>/data/projects
[{{...}},
{{...}}]
```
[OpenAPI definition](/openapi.json)
"""

swagger_template = {
    "openapi": "3.1",
    "info": {
        "title": "Shotline API",
        "description": description,
        "version": __version__,
    },
    "host": "localhost:5000",
    "basePath": "/",
    "schemes": ["http", "https"],
    "securityDefinitions": {
        "JWT Authorization": {
            "name": "Authorization",
            "in": "header",
            "type": "apiKey",
            "description": "Format in header: **Authorization: Bearer {token}**. \n\n Value example: Bearer xxxxx.yyyyy.zzzzz",
        }
    },
    "security": [{"JWT Authorization": []}],
    "tags": [
        {"name": "Authentication"},
        {"name": "Index"},
        {"name": "Persons"},
        {"name": "Statuses"},
        {"name": "Projects"},
        {"name": "Permissions"},
        {"name": "Shots"},
        {"name": "Assets"},
        {"name": "Versions"},
        {"name": "Notes"},
        {"name": "Playlists"},
        {"name": "User"},
    ],
    "definitions": {
        " Common fields for all model instances": {
            "type": "object",
            "properties": {
                " id": {
                    "type": "string",
                    "format": "UUID",
                    "description": "A unique ID made of letters, hyphens and numbers",
                    "example": "a24a6ea4-ce75-4665-a070-57453082c25",
                },
                "created_at": {
                    "type": "string",
                    "format": "date-time",
                    "description": "The creation date",
                },
                "updated_at": {
                    "type": "string",
                    "format": "date-time",
                    "description": "The update date",
                },
            },
        },
        "Project": {
            "type": "object",
            "properties": {
                "code": {
                    "type": "string",
                    "description": "Unique code of the production",
                },
                "name": {"type": "string", "description": "Name of project"},
                "description": {"type": "string"},
                "client_name": {"type": "string"},
                "start_date": {"type": "string", "format": "date"},
                "end_date": {"type": "string", "format": "date"},
                "status_id": {"type": "string", "format": "UUID"},
                "created_by": {"type": "string", "format": "UUID"},
            },
        },
        "ProjectPermission": {
            "type": "object",
            "properties": {
                "person_id": {"type": "string", "format": "UUID"},
                "project_id": {"type": "string", "format": "UUID"},
                "role": {
                    "type": "string",
                    "enum": ["viewer", "contributor", "owner"],
                },
            },
        },
        "Episode": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "ep_number": {"type": "integer"},
                "cut_order": {"type": "integer"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "duration": {
                    "type": "integer",
                    "description": "Sum of its sequence durations in seconds",
                },
                "project_id": {"type": "string", "format": "UUID"},
                "status_id": {"type": "string", "format": "UUID"},
                "assigned_to": {"type": "string", "format": "UUID"},
            },
        },
        "Sequence": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "cut_order": {"type": "integer"},
                "duration": {
                    "type": "integer",
                    "description": "Duration in seconds",
                },
                "story_id": {"type": "string"},
                "episode_id": {"type": "string", "format": "UUID"},
                "status_id": {"type": "string", "format": "UUID"},
                "assigned_to": {"type": "string", "format": "UUID"},
            },
        },
        "Shot": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "sequence_number": {"type": "integer"},
                "shot_type": {
                    "type": "string",
                    "enum": ["establishing", "medium", "closeup", "detail"],
                },
                "duration": {
                    "type": "integer",
                    "description": "Duration in frames",
                },
                "cut_order": {"type": "integer"},
                "sequence_id": {"type": "string", "format": "UUID"},
                "status_id": {"type": "string", "format": "UUID"},
                "assigned_to": {"type": "string", "format": "UUID"},
            },
        },
        "Asset": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "asset_type": {"type": "string"},
                "description": {"type": "string"},
                "thumbnail_path": {"type": "string"},
                "project_id": {"type": "string", "format": "UUID"},
                "status_id": {"type": "string", "format": "UUID"},
                "assigned_to": {"type": "string", "format": "UUID"},
            },
        },
        "Version": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "version_number": {"type": "integer"},
                "latest": {"type": "boolean"},
                "entity_type": {"type": "string"},
                "entity_id": {"type": "string", "format": "UUID"},
                "file_path": {"type": "string"},
                "duration": {"type": "number"},
                "status_id": {"type": "string", "format": "UUID"},
                "status_updated_at": {"type": "string", "format": "date-time"},
            },
        },
        "Note": {
            "type": "object",
            "properties": {
                "subject": {"type": "string"},
                "content": {"type": "string"},
                "is_read": {"type": "boolean"},
                "attachments": {"type": "array", "items": {"type": "string"}},
                "link_type": {"type": "string"},
                "link_id": {"type": "string", "format": "UUID"},
                "assigned_to": {"type": "string", "format": "UUID"},
            },
        },
        "Playlist": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "version_codes": {"type": "array", "items": {"type": "string"}},
                "project_id": {"type": "string", "format": "UUID"},
                "status_id": {"type": "string", "format": "UUID"},
            },
        },
        "Status": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "color": {"type": "string"},
                "is_active": {"type": "boolean"},
                "sort_order": {"type": "integer"},
            },
        },
    },
}
