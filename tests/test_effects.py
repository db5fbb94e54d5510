from html_prototype.effects import draggable, droppable, sortable, visual_effect


class TestVisualEffect:
	def test_with_options(self):
		result = visual_effect("highlight", "posts", {"duration": "0.5"})
		assert result == "new Effect.Highlight( 'posts', { duration: 0.5 } );"

	def test_without_options(self):
		assert visual_effect("fade", "box") == "new Effect.Fade( 'box', {} );"


class TestDraggable:
	def test_nested_options(self):
		result = draggable("x", {"snap": [10, True], "opts": {"a": None}})
		assert result == "new Draggable( 'x', { opts: {}, snap: [10, true] } )"

	def test_draggable(self):
		result = draggable("my_image", {"revert": "true", "constraint": "'vertical'"})
		assert result == (
			"new Draggable( 'my_image', { constraint: 'vertical', revert: true } )"
		)

	def test_no_options(self):
		assert draggable("x") == "new Draggable( 'x', {} )"


class TestDroppable:
	def test_drop_calls_remote_with_element_id(self):
		result = droppable(
			"cart", {"url": "/add", "accept": "product"}, hoverclass="hover"
		)
		assert result == (
			"Droppables.add( 'cart', { accept: 'product', hoverclass: 'hover', "
			+ "onDrop: function(element){new Ajax.Request( '/add', "
			+ "{ asynchronous: 1, parameters: 'id=' + encodeURIComponent(element.id) } )} } )"
		)

	def test_ajax_keys_do_not_leak(self):
		result = droppable("cart", {"url": "/add", "update": "items", "with": "'x=1'"})
		assert "url:" not in result
		assert "with:" not in result
		assert "new Ajax.Updater( 'items', '/add'" in result
		assert "parameters: 'x=1'" in result

	def test_explicit_hoverclass_wins(self):
		result = droppable("cart", {"url": "/a", "hoverclass": "over"}, hoverclass="hover")
		assert "hoverclass: 'over'" in result

	def test_accept_list(self):
		result = droppable("cart", {"url": "/a", "accept": ["product", "gift"]})
		assert "accept: ['product', 'gift']" in result

	def test_no_hoverclass(self):
		assert "hoverclass" not in droppable("cart", {"url": "/a"})

	def test_custom_on_drop_is_kept(self):
		result = droppable("cart", {"url": "/a", "onDrop": "myDrop"})
		assert "onDrop: myDrop" in result
		assert "Ajax" not in result


class TestSortable:
	def test_serializes_order(self):
		result = sortable("my_list", {"url": "/order"})
		assert result == (
			"Sortable.create( 'my_list', { onUpdate: function () { "
			+ "new Ajax.Request( '/order', "
			+ "{ asynchronous: 1, parameters: Sortable.serialize('my_list') } ) } } )"
		)

	def test_widget_options_pass_through(self):
		result = sortable("list", {"url": "/o", "tag": "'div'", "update": "box"})
		assert "tag: 'div'" in result
		assert "new Ajax.Updater( 'box', '/o'" in result
		assert "update:" not in result
