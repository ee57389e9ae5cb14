from django.core.management.base import BaseCommand, CommandError
from graphene_django.settings import graphene_settings
from graphql import get_introspection_query

from graphql_reference.catalog import load_schema_document, parse_schema_document
from graphql_reference.config_proxy import get_setting
from graphql_reference.exceptions import SchemaDocumentError
from graphql_reference.site import build_reference_site


class Command(BaseCommand):
    help = "Build static GraphQL reference pages from an introspection schema."

    def add_arguments(self, parser):
        parser.add_argument(
            "--schema",
            dest="schema_path",
            help="Introspection JSON file (default: GRAPHQL_REFERENCE schema_path).",
        )
        parser.add_argument(
            "--out",
            dest="output_dir",
            help="Output directory (default: GRAPHQL_REFERENCE output_dir).",
        )
        parser.add_argument(
            "--gzip",
            action="store_true",
            help="Also write a gzipped copy of every page.",
        )
        parser.add_argument(
            "--from-graphene",
            action="store_true",
            help="Introspect GRAPHENE.SCHEMA instead of reading a JSON file.",
        )

    def handle(self, *args, **options):
        try:
            if options["from_graphene"]:
                document = self._introspect_graphene()
            else:
                document = load_schema_document(options["schema_path"] or get_setting("schema_path"))
        except SchemaDocumentError as exc:
            raise CommandError(str(exc)) from exc

        site = build_reference_site(
            document,
            output_dir=options["output_dir"],
            gzip=options["gzip"] or None,
        )
        written = site.build()
        if site.catalog.root_query is None:
            self.stdout.write(self.style.WARNING("Schema has no Query type; query page skipped"))
        self.stdout.write(self.style.SUCCESS(f"Wrote {len(written)} pages to {site.output_dir}"))

    def _introspect_graphene(self):
        schema = graphene_settings.SCHEMA
        if not schema:
            raise CommandError("GRAPHENE.SCHEMA is not configured or could not be loaded.")

        result = schema.execute(get_introspection_query())
        if result.errors:
            raise CommandError(f"Introspection failed: {result.errors}")
        return parse_schema_document(result.data, source="GRAPHENE.SCHEMA")
