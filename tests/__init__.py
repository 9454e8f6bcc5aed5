# Test suite for Cube Chat
#
# Run all tests: python tests/run_all_tests.py
# Run specific suite: python tests/run_all_tests.py --suite render
# Run with pytest: python -m pytest tests/ -v
#
# Test suites:
#   - test_models.py - Data models (Viewport, Message, scene graph, camera)
#   - test_render_session.py - Viewport lifecycle, resize and frame loop (fake host)
#   - test_canvas_renderer.py - Edge projection and Tk canvas drawing
#   - test_viewport_host.py - Tk host contract and logging setup
#   - test_conversation_session.py - Turn protocol and history
#   - test_chat_backend.py - OpenAI chat backend (mocked)
#   - test_async_runner.py - Background event loop
#   - test_config_prompts.py - Configuration, prompts and command line
