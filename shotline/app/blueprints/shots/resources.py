from flask_restful import Resource
from flask_jwt_extended import jwt_required

from shotline.app.blueprints.shots.schemas import (
    EpisodeCreateSchema,
    EpisodeUpdateSchema,
    SequenceCreateSchema,
    SequenceUpdateSchema,
    ShotCreateSchema,
    ShotUpdateSchema,
)
from shotline.app.mixin import ArgsMixin
from shotline.app.services import (
    episodes_service,
    persons_service,
    project_access_service,
    projects_service,
    sequences_service,
    shots_service,
)
from shotline.app.utils.validation import (
    get_update_data,
    validate_request_body,
)


class ProjectEpisodesResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, project_id):
        """
        Get project episodes
        ---
        tags:
        - Shots
        description: Get episodes of a project ordered by episode number.
          Requires viewer access on the project.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: All episodes related to given project
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Episode'
        """
        project = projects_service.get_project(project_id)
        project_access_service.check_viewer_access(
            project["id"], persons_service.get_current_user_context()
        )
        return episodes_service.get_episodes_for_project(project["id"])

    @jwt_required()
    def post(self, project_id):
        """
        Create project episode
        ---
        tags:
        - Shots
        description: Create an episode in a project. Requires contributor
          access on the project. Episode codes are unique.
        parameters:
          - in: path
            name: project_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - code
                  - name
                properties:
                  code:
                    type: string
                    example: EP01
                  name:
                    type: string
                    example: Pilot
                  ep_number:
                    type: integer
                    example: 1
                  description:
                    type: string
                    example: A short description of the episode
                  status:
                    type: string
                    example: wip
        responses:
            201:
                description: Episode created
            409:
                description: Code already used
        """
        project = projects_service.get_project(project_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            project["id"], user_context
        )
        data = validate_request_body(EpisodeCreateSchema)
        return (
            episodes_service.create_episode(
                project["id"],
                created_by=user_context.user_id,
                **data.model_dump()
            ),
            201,
        )


class EpisodesResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get episodes
        ---
        tags:
        - Shots
        description: Get episodes of the projects the current user has access
          to, with optional filters and pagination.
        parameters:
          - in: query
            name: project_id
            required: False
            type: string
            format: uuid
          - in: query
            name: status_id
            required: False
            type: string
            format: uuid
          - in: query
            name: created_by
            required: False
            type: string
            format: uuid
          - in: query
            name: assigned_to
            required: False
            type: string
            format: uuid
          - in: query
            name: search
            required: False
            type: string
          - in: query
            name: page
            required: False
            type: integer
          - in: query
            name: limit
            required: False
            type: integer
        responses:
            200:
                description: Episodes the user can access
        """
        return episodes_service.get_episodes(
            persons_service.get_current_user_context(),
            project_id=self.get_project_id(),
            status_id=self.get_id_parameter("status_id"),
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )


class EpisodeResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, episode_id):
        """
        Get episode
        ---
        tags:
        - Shots
        description: Get an episode with its sequences. Requires viewer access
          on the project of the episode.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Episode found and returned
            404:
                description: Episode not found
        """
        episode = episodes_service.get_full_episode(episode_id)
        project_access_service.check_viewer_access(
            episode["project_id"], persons_service.get_current_user_context()
        )
        return episode

    @jwt_required()
    def put(self, episode_id):
        """
        Update episode
        ---
        tags:
        - Shots
        description: Update an episode. Requires contributor access on the
          project of the episode, and on the target project when the episode
          is moved.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Episode updated
            403:
                description: No contributor access
            409:
                description: Code already used
        """
        episode = episodes_service.get_episode(episode_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            episode["project_id"], user_context
        )
        data = get_update_data(EpisodeUpdateSchema)
        if data.get("project_id") is not None and str(
            data["project_id"]
        ) != str(episode["project_id"]):
            project = projects_service.get_project(data["project_id"])
            project_access_service.check_contributor_access(
                project["id"], user_context
            )
        return episodes_service.update_episode(episode["id"], data)

    @jwt_required()
    def delete(self, episode_id):
        """
        Delete episode
        ---
        tags:
        - Shots
        description: Delete an episode and its sequences. Requires contributor
          access on the project of the episode.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Episode deleted
        """
        episode = episodes_service.get_episode(episode_id)
        project_access_service.check_contributor_access(
            episode["project_id"], persons_service.get_current_user_context()
        )
        episodes_service.remove_episode(episode["id"])
        return "", 204


class EpisodeDurationResource(Resource):
    @jwt_required()
    def get(self, episode_id):
        """
        Update episode duration
        ---
        tags:
        - Shots
        description: Recompute the duration of an episode from its sequences,
          store it and return the episode. Requires viewer access on the
          project of the episode.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Episode with its updated duration
        """
        episode = episodes_service.get_episode(episode_id)
        project_access_service.check_viewer_access(
            episode["project_id"], persons_service.get_current_user_context()
        )
        return episodes_service.update_episode_duration(episode["id"])


class EpisodeSequencesResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, episode_id):
        """
        Get episode sequences
        ---
        tags:
        - Shots
        description: Get sequences of an episode ordered by cut order.
          Requires viewer access on the project of the episode.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: All sequences of given episode
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Sequence'
        """
        episode = episodes_service.get_episode(episode_id)
        project_access_service.check_viewer_access(
            episode["project_id"], persons_service.get_current_user_context()
        )
        return sequences_service.get_sequences_for_episode(episode["id"])

    @jwt_required()
    def post(self, episode_id):
        """
        Create episode sequence
        ---
        tags:
        - Shots
        description: Create a sequence in an episode. Requires contributor
          access on the project of the episode. The episode duration is
          updated.
        parameters:
          - in: path
            name: episode_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - code
                  - name
                properties:
                  code:
                    type: string
                    example: EP01_SQ01
                  name:
                    type: string
                    example: Opening
                  cut_order:
                    type: integer
                    example: 1
                  duration:
                    type: integer
                    example: 120
        responses:
            201:
                description: Sequence created
            409:
                description: Code already used
        """
        episode = episodes_service.get_episode(episode_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            episode["project_id"], user_context
        )
        data = validate_request_body(SequenceCreateSchema)
        return (
            sequences_service.create_sequence(
                episode["id"],
                created_by=user_context.user_id,
                **data.model_dump()
            ),
            201,
        )


class SequencesResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get sequences
        ---
        tags:
        - Shots
        description: Get sequences of the projects the current user has
          access to, with optional filters and pagination.
        parameters:
          - in: query
            name: episode_id
            required: False
            type: string
            format: uuid
          - in: query
            name: project_id
            required: False
            type: string
            format: uuid
          - in: query
            name: status_id
            required: False
            type: string
            format: uuid
          - in: query
            name: cut_order
            required: False
            type: integer
          - in: query
            name: created_by
            required: False
            type: string
            format: uuid
          - in: query
            name: assigned_to
            required: False
            type: string
            format: uuid
          - in: query
            name: search
            required: False
            type: string
          - in: query
            name: page
            required: False
            type: integer
          - in: query
            name: limit
            required: False
            type: integer
        responses:
            200:
                description: Sequences the user can access
        """
        return sequences_service.get_sequences(
            persons_service.get_current_user_context(),
            episode_id=self.get_episode_id(),
            project_id=self.get_project_id(),
            status_id=self.get_id_parameter("status_id"),
            cut_order=self.get_int_parameter("cut_order"),
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )


class SequenceResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, sequence_id):
        """
        Get sequence
        ---
        tags:
        - Shots
        description: Get a sequence. Requires viewer access on the project of
          its episode.
        parameters:
          - in: path
            name: sequence_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Sequence found and returned
        """
        sequence = sequences_service.get_full_sequence(sequence_id)
        project_access_service.check_viewer_access(
            sequence["project_id"], persons_service.get_current_user_context()
        )
        return sequence

    @jwt_required()
    def put(self, sequence_id):
        """
        Update sequence
        ---
        tags:
        - Shots
        description: Update a sequence. Requires contributor access on the
          project of its episode, and on the project of the target episode
          when the sequence is moved. Durations of the impacted episodes are
          updated.
        parameters:
          - in: path
            name: sequence_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Sequence updated
            409:
                description: Code already used
        """
        sequence = sequences_service.get_full_sequence(sequence_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            sequence["project_id"], user_context
        )
        data = get_update_data(SequenceUpdateSchema)
        if data.get("episode_id") is not None and str(
            data["episode_id"]
        ) != str(sequence["episode_id"]):
            episode = episodes_service.get_episode(data["episode_id"])
            project_access_service.check_contributor_access(
                episode["project_id"], user_context
            )
        return sequences_service.update_sequence(sequence["id"], data)

    @jwt_required()
    def delete(self, sequence_id):
        """
        Delete sequence
        ---
        tags:
        - Shots
        description: Delete a sequence. Requires contributor access on the
          project of its episode. The episode duration is updated.
        parameters:
          - in: path
            name: sequence_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Sequence deleted
        """
        sequence = sequences_service.get_full_sequence(sequence_id)
        project_access_service.check_contributor_access(
            sequence["project_id"], persons_service.get_current_user_context()
        )
        sequences_service.remove_sequence(sequence["id"])
        return "", 204


class SequenceShotsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, sequence_id):
        """
        Get sequence shots
        ---
        tags:
        - Shots
        description: Get shots of a sequence ordered by their number in the
          sequence. Requires viewer access on the project of the sequence.
        parameters:
          - in: path
            name: sequence_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: All shots of given sequence
                content:
                  application/json:
                    schema:
                      type: array
                      items:
                        $ref: '#/definitions/Shot'
        """
        sequence = sequences_service.get_full_sequence(sequence_id)
        project_access_service.check_viewer_access(
            sequence["project_id"], persons_service.get_current_user_context()
        )
        return shots_service.get_shots_for_sequence(sequence["id"])

    @jwt_required()
    def post(self, sequence_id):
        """
        Create sequence shot
        ---
        tags:
        - Shots
        description: Create a shot in a sequence. Requires contributor access
          on the project of the sequence. Shot durations are in frames and
          don't change sequence or episode durations.
        parameters:
          - in: path
            name: sequence_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        requestBody:
          required: true
          content:
            application/json:
              schema:
                type: object
                required:
                  - code
                  - name
                  - sequence_number
                properties:
                  code:
                    type: string
                    example: EP01_SQ01_SH010
                  name:
                    type: string
                    example: Wide establishing
                  sequence_number:
                    type: integer
                    example: 10
                  shot_type:
                    type: string
                    example: establishing
                  duration:
                    type: integer
                    example: 96
        responses:
            201:
                description: Shot created
            409:
                description: Code already used
        """
        sequence = sequences_service.get_full_sequence(sequence_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            sequence["project_id"], user_context
        )
        data = validate_request_body(ShotCreateSchema)
        return (
            shots_service.create_shot(
                sequence["id"],
                created_by=user_context.user_id,
                **data.model_dump()
            ),
            201,
        )


class ShotsResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self):
        """
        Get shots
        ---
        tags:
        - Shots
        description: Get shots of the projects the current user has access
          to, with optional filters and pagination.
        parameters:
          - in: query
            name: sequence_id
            required: False
            type: string
            format: uuid
          - in: query
            name: episode_id
            required: False
            type: string
            format: uuid
          - in: query
            name: project_id
            required: False
            type: string
            format: uuid
          - in: query
            name: status_id
            required: False
            type: string
            format: uuid
          - in: query
            name: shot_type
            required: False
            type: string
          - in: query
            name: search
            required: False
            type: string
          - in: query
            name: page
            required: False
            type: integer
          - in: query
            name: limit
            required: False
            type: integer
        responses:
            200:
                description: Shots the user can access
        """
        return shots_service.get_shots(
            persons_service.get_current_user_context(),
            sequence_id=self.get_id_parameter("sequence_id"),
            episode_id=self.get_episode_id(),
            project_id=self.get_project_id(),
            status_id=self.get_id_parameter("status_id"),
            shot_type=self.get_text_parameter("shot_type"),
            created_by=self.get_id_parameter("created_by"),
            assigned_to=self.get_id_parameter("assigned_to"),
            search=self.get_text_parameter("search"),
            page=self.get_page(),
            limit=self.get_limit(),
        )


class ShotResource(Resource, ArgsMixin):
    @jwt_required()
    def get(self, shot_id):
        """
        Get shot
        ---
        tags:
        - Shots
        description: Get a shot with the notes left on it. Requires viewer
          access on the project of the shot.
        parameters:
          - in: path
            name: shot_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Shot found and returned
            404:
                description: Shot not found
        """
        shot = shots_service.get_full_shot(shot_id)
        project_access_service.check_viewer_access(
            shot["project_id"], persons_service.get_current_user_context()
        )
        return shot

    @jwt_required()
    def put(self, shot_id):
        """
        Update shot
        ---
        tags:
        - Shots
        description: Update a shot. Requires contributor access on the
          project of the shot, and on the project of the target sequence when
          the shot is moved.
        parameters:
          - in: path
            name: shot_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            200:
                description: Shot updated
            409:
                description: Code already used
        """
        shot = shots_service.get_full_shot(shot_id)
        user_context = persons_service.get_current_user_context()
        project_access_service.check_contributor_access(
            shot["project_id"], user_context
        )
        data = get_update_data(ShotUpdateSchema)
        if data.get("sequence_id") is not None and str(
            data["sequence_id"]
        ) != str(shot["sequence_id"]):
            sequence = sequences_service.get_full_sequence(data["sequence_id"])
            project_access_service.check_contributor_access(
                sequence["project_id"], user_context
            )
        return shots_service.update_shot(shot["id"], data)

    @jwt_required()
    def delete(self, shot_id):
        """
        Delete shot
        ---
        tags:
        - Shots
        description: Delete a shot with its versions and notes. Requires
          contributor access on the project of the shot.
        parameters:
          - in: path
            name: shot_id
            required: True
            type: string
            format: uuid
            example: a24a6ea4-ce75-4665-a070-57453082c25
        responses:
            204:
                description: Shot deleted
        """
        shot = shots_service.get_full_shot(shot_id)
        project_access_service.check_contributor_access(
            shot["project_id"], persons_service.get_current_user_context()
        )
        shots_service.remove_shot(shot["id"])
        return "", 204
