from mako.template import Template

# Script content sits inside an HTML comment for browsers without JavaScript
SCRIPT_TEMPLATE = Template(
	"""<script${attrs}>
<!--
${content}
//-->
</script>"""
)

PERIODICAL_EXECUTER_TEMPLATE = Template(
	"new PeriodicalExecuter( function () { ${code} }, ${frequency} );"
)

OBSERVER_TEMPLATE = Template(
	"new ${klass}( '${element_id}', ${frequency}, "
	"function( element, value ) { ${callback} } );"
)

AUTOCOMPLETER_TEMPLATE = Template(
	"new Ajax.Autocompleter( '${field_id}', '${update}', '${url}', ${options} )"
)

AUTOCOMPLETE_STYLESHEET = """
div.auto_complete {
    width: 350px;
    background: #fff;
}
div.auto_complete ul {
    border:1px solid #888;
    margin:0;
    padding:0;
    width:100%;
    list-style-type:none;
}
div.auto_complete ul li {
    margin:0;
    padding:3px;
}
div.auto_complete ul li.selected {
    background-color: #ffb;
}
div.auto_complete ul strong.highlight {
    color: #800;
    margin:0;
    padding:0;
}
"""
