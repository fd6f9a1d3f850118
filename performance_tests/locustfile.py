"""Basic Locust file for performance testing the SWAPI GraphQL API.

To run:
1. Ensure Locust is installed (`pip install -e ".[perf]"`).
2. Run locust -f performance_tests/locustfile.py
3. Open your browser to http://localhost:8089 (or the port specified by Locust).
4. Configure the number of users, spawn rate, and host (e.g., http://localhost:8000).
5. Start Swarming.

Every query fans out to the REST catalog, so point SWAPI_BASE_URL at a local
mirror before swarming.
"""

import base64
import random

from locust import HttpUser, between, events, task


@events.init_command_line_parser.add_listener
def _(parser):
    parser.add_argument(
        "--page-size",
        type=int,
        env_var="LOCUST_PAGE_SIZE",
        default=5,
        help="Value passed as `first` to paginated queries",
    )


class ApiUser(HttpUser):
    wait_time = between(1, 3)  # seconds
    graphql_endpoint = "/graphql"
    # Global IDs collected from list queries, reused by node lookups
    seen_ids = []

    def post_query(self, name: str, query: str, variables: dict | None = None) -> dict | None:
        with self.client.post(
            self.graphql_endpoint,
            json={"query": query, "variables": variables or {}},
            catch_response=True,
            name=name,
        ) as response:
            if response.status_code != 200:
                response.failure(f"{name} failed with status {response.status_code}: {response.text}")
                return None
            data = response.json()
            if data.get("errors"):
                response.failure(f"GraphQL error in {name}: {data['errors']}")
                return None
            response.success()
            return data.get("data")

    @task(1)
    def health_check(self):
        self.client.get("/health", name="App: Health Check")

    @task(5)
    def page_through_people(self):
        query = """
            query People($first: Int, $after: String) {
                allPeople(first: $first, after: $after) {
                    totalCount
                    edges { cursor node { id name } }
                    pageInfo { hasNextPage endCursor }
                }
            }
        """
        variables = {"first": self.environment.parsed_options.page_size, "after": None}
        data = self.post_query("GraphQL: allPeople page 1", query, variables)
        if not data:
            return
        people = data["allPeople"]
        self.seen_ids.extend(edge["node"]["id"] for edge in people["edges"])

        if people["pageInfo"]["hasNextPage"]:
            variables["after"] = people["pageInfo"]["endCursor"]
            self.post_query("GraphQL: allPeople page 2", query, variables)

    @task(3)
    def film_with_characters(self):
        query = """
            query Film($filmID: ID, $first: Int) {
                film(filmID: $filmID) {
                    title
                    characterConnection(first: $first) {
                        totalCount
                        characters: people { name homeworld { name } }
                    }
                }
            }
        """
        variables = {
            "filmID": str(random.randint(1, 6)),
            "first": self.environment.parsed_options.page_size,
        }
        self.post_query("GraphQL: film with characters", query, variables)

    @task(2)
    def search_starships(self):
        query = """
            query Search($name: String) {
                starshipsByName(name: $name) { totalCount starships { name MGLT } }
            }
        """
        variables = {"name": random.choice(["star", "falcon", "x-wing", "destroyer"])}
        self.post_query("GraphQL: starshipsByName", query, variables)

    @task(2)
    def node_lookup(self):
        if self.seen_ids:
            global_id = random.choice(self.seen_ids)
        else:
            global_id = base64.b64encode(f"people:{random.randint(1, 10)}".encode()).decode()

        query = """
            query Node($id: ID!) {
                node(id: $id) { __typename id ... on Person { name } }
            }
        """
        self.post_query("GraphQL: node", query, {"id": global_id})
