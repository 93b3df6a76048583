#!/usr/bin/env python3
"""
Unit tests for mapping server responses to model objects.
"""

import unittest
import xml.etree.ElementTree as ET

from jasperclient.exceptions import ResponseParseError
from jasperclient.models import (
    InputControl,
    InputControlsList,
    InputControlStatesList,
    ReportDescriptor,
    ReportExecutionRequest,
    ReportExecutionResponse,
    ReportParameter,
    ResourceDescriptor,
    ResourceLookupsList,
    ResourcesList,
    ResourceType,
    ServerInfo,
    VersionCodes,
)

REPORT_UNIT_XML = """
<resourceDescriptor name="AllAccounts" wsType="reportUnit" uriString="/reports/samples/AllAccounts" isNew="false">
  <label><![CDATA[All Accounts Report]]></label>
  <description>All accounts</description>
  <creationDate>1337611237000</creationDate>
  <resourceProperty name="PROP_PARENT_FOLDER"><value>/reports/samples</value></resourceProperty>
  <resourceDescriptor name="Country" wsType="inputControl" uriString="/reports/samples/AllAccounts_files/Country" isNew="false">
    <label>Country</label>
  </resourceDescriptor>
  <parameter name="Country" isListItem="true">USA</parameter>
</resourceDescriptor>
"""


class TestResourceDescriptor(unittest.TestCase):
    def test_from_xml(self):
        descriptor = ResourceDescriptor.from_xml(REPORT_UNIT_XML)

        self.assertEqual(descriptor.name, "AllAccounts")
        self.assertEqual(descriptor.ws_type, "reportUnit")
        self.assertEqual(descriptor.uri_string, "/reports/samples/AllAccounts")
        self.assertFalse(descriptor.is_new)
        self.assertEqual(descriptor.label, "All Accounts Report")
        self.assertEqual(descriptor.creation_date, "1337611237000")
        self.assertEqual(descriptor.get_property_by_name("PROP_PARENT_FOLDER").value, "/reports/samples")
        self.assertIsNone(descriptor.get_property_by_name("PROP_MISSING"))
        self.assertEqual(len(descriptor.children), 1)
        self.assertEqual(descriptor.children[0].label, "Country")
        self.assertTrue(descriptor.parameters[0].is_list_item)
        self.assertEqual(descriptor.parameters[0].value, "USA")

    def test_to_xml_keeps_attributes_and_children(self):
        descriptor = ResourceDescriptor.from_xml(REPORT_UNIT_XML)
        element = ET.fromstring(descriptor.to_xml_string())

        self.assertEqual(element.tag, "resourceDescriptor")
        self.assertEqual(element.get("uriString"), "/reports/samples/AllAccounts")
        self.assertEqual(element.get("isNew"), "false")
        self.assertEqual(element.findtext("label"), "All Accounts Report")
        self.assertEqual(len(element.findall("resourceDescriptor")), 1)
        self.assertEqual(element.find("parameter").get("isListItem"), "true")

    def test_wrong_root_is_rejected(self):
        with self.assertRaises(ResponseParseError):
            ResourceDescriptor.from_xml("<resourceDescriptors/>")

    def test_malformed_xml_is_rejected(self):
        with self.assertRaises(ResponseParseError):
            ResourceDescriptor.from_xml("<resourceDescriptor")

    def test_resources_list(self):
        resources = ResourcesList.from_xml(f"<resourceDescriptors>{REPORT_UNIT_XML}{REPORT_UNIT_XML}</resourceDescriptors>")
        self.assertEqual(len(resources), 2)
        self.assertEqual([d.name for d in resources], ["AllAccounts", "AllAccounts"])


class TestReportDescriptor(unittest.TestCase):
    def test_from_xml(self):
        report = ReportDescriptor.from_xml(
            """<report>
                 <uuid>6e3a1d06-1bd5-4c32</uuid>
                 <originalUri>/reports/samples/AllAccounts</originalUri>
                 <totalPages>43</totalPages>
                 <startPage>1</startPage>
                 <endPage>43</endPage>
                 <file type="text/html"><![CDATA[report]]></file>
                 <file type="image/png"><![CDATA[img_0_0_0]]></file>
               </report>"""
        )
        self.assertEqual(report.uuid, "6e3a1d06-1bd5-4c32")
        self.assertEqual(report.total_pages, 43)
        self.assertEqual([(a.name, a.type) for a in report.attachments], [("report", "text/html"), ("img_0_0_0", "image/png")])


class TestJsonModels(unittest.TestCase):
    def test_resource_lookups(self):
        lookups = ResourceLookupsList.from_dict(
            {
                "resourceLookup": [
                    {"label": "Samples", "uri": "/reports/samples", "resourceType": "folder", "version": 2},
                    {"label": "Chart", "uri": "/reports/chart", "resourceType": "adhocDataView"},
                ]
            }
        )
        self.assertEqual(len(lookups), 2)
        self.assertTrue(lookups.resource_lookups[0].is_folder)
        self.assertEqual(lookups.resource_lookups[1].resource_type, ResourceType.unknown)

        lookups.set_counts("2", None)
        self.assertEqual(lookups.result_count, 2)
        self.assertEqual(lookups.total_count, 0)

    def test_input_control_selected_values(self):
        control = InputControl.from_dict(
            {
                "id": "Country",
                "label": "Country",
                "mandatory": True,
                "type": "multiSelect",
                "slaveDependencies": ["State"],
                "validationRules": [{"mandatoryValidationRule": {"errorMessage": "This field is mandatory"}}],
                "state": {
                    "id": "Country",
                    "options": [
                        {"label": "Canada", "value": "Canada", "selected": False},
                        {"label": "USA", "value": "USA", "selected": True},
                    ],
                },
            }
        )
        self.assertEqual(control.selected_values, ["USA"])
        self.assertEqual(control.slave_dependencies, ["State"])
        self.assertEqual(control.validation_rules[0].type, "mandatoryValidationRule")
        self.assertEqual(control.validation_rules[0].error_message, "This field is mandatory")

        text_control = InputControl.from_dict({"id": "Name", "state": {"id": "Name", "value": "abc"}})
        self.assertEqual(text_control.selected_values, ["abc"])
        self.assertEqual(InputControl(id="Empty").selected_values, [])

    def test_empty_lists(self):
        self.assertEqual(InputControlsList.from_dict(None).input_controls, [])
        self.assertEqual(InputControlStatesList.from_dict({}).input_control_states, [])

    def test_list_items_must_be_objects(self):
        for parse, data in (
            (ResourceLookupsList.from_dict, {"resourceLookup": ["/reports/samples"]}),
            (InputControlsList.from_dict, {"inputControl": [None]}),
            (InputControlStatesList.from_dict, {"inputControlState": "USA"}),
            (InputControl.from_dict, {"id": "Country", "validationRules": ["mandatory"]}),
            (ReportExecutionResponse.from_dict, {"exports": [{"id": "html", "attachments": [7]}]}),
        ):
            with self.subTest(data=data):
                with self.assertRaises(ResponseParseError):
                    parse(data)

    def test_report_parameter_accepts_single_value(self):
        self.assertEqual(ReportParameter("Country", "USA").values, ["USA"])
        self.assertEqual(ReportParameter("Country", ["USA", "Mexico"]).to_dict(), {"name": "Country", "value": ["USA", "Mexico"]})

    def test_report_execution_request_body(self):
        request = ReportExecutionRequest(
            report_unit_uri="/reports/samples/AllAccounts",
            output_format="pdf",
            pages="1-2",
            parameters=[ReportParameter("Country", ["USA"])],
        )
        body = request.to_dict()
        self.assertEqual(body["reportUnitUri"], "/reports/samples/AllAccounts")
        self.assertIs(body["async"], False)
        self.assertEqual(body["pages"], "1-2")
        self.assertNotIn("ignorePagination", body)
        self.assertEqual(body["parameters"], {"reportParameter": [{"name": "Country", "value": ["USA"]}]})

    def test_report_execution_response(self):
        response = ReportExecutionResponse.from_dict(
            {
                "requestId": "f3a9805a-4089-4b53",
                "reportURI": "/reports/samples/AllAccounts",
                "status": "ready",
                "totalPages": 3,
                "exports": [
                    {
                        "id": "html",
                        "status": "ready",
                        "outputResource": {"contentType": "text/html"},
                        "attachments": [{"contentType": "image/png", "fileName": "img_0_0_0"}],
                    }
                ],
            }
        )
        self.assertTrue(response.is_ready)
        self.assertEqual(response.total_pages, 3)
        self.assertEqual(response.get_export("html").attachments[0].file_name, "img_0_0_0")
        self.assertIsNone(response.get_export("pdf"))
        self.assertIsNone(response.error_descriptor)

    def test_server_info_version_code(self):
        self.assertEqual(ServerInfo(version="5.5.0").version_code, VersionCodes.EMERALD_MR2)
        self.assertEqual(ServerInfo(version="6").version_code, VersionCodes.AMBER)
        self.assertEqual(ServerInfo().version_code, VersionCodes.UNKNOWN)
        self.assertTrue(ServerInfo.from_dict({"edition": "PRO"}).is_pro)


if __name__ == "__main__":
    unittest.main()
