"""Tests for the Java generator."""

from json_typegen.codegen.languages.java import (
    JavaClassStyle,
    JavaGenerator,
    JavaOptions,
    JavaSerializationLibrary,
    create_spring_generator,
)


def java(data, **options) -> str:
    return JavaGenerator().generate(data, JavaOptions(**options))


class TestRecords:
    def test_person_record(self, person_data) -> None:
        assert java(person_data, root_name="Person") == (
            "package com.example;\n"
            "\n"
            "import java.util.List;\n"
            "\n"
            "public record Person(\n"
            "    String name,\n"
            "    double age,\n"
            "    List<String> tags\n"
            ") {}"
        )

    def test_no_package(self) -> None:
        assert java({"a": 1}, package_name="").startswith("import java.util.List;\n\n")

    def test_boxed_generics(self) -> None:
        code = java({"scores": [1.5], "flags": [True], "grid": [[1]]})
        assert "    List<Double> scores," in code
        assert "    List<Boolean> flags," in code
        assert "    List<List<Double>> grid\n" in code

    def test_jackson_annotations_on_renames(self, renamed_data) -> None:
        code = java(renamed_data, serialization_library=JavaSerializationLibrary.JACKSON)

        assert "import com.fasterxml.jackson.annotation.JsonProperty;" in code
        assert '    @JsonProperty("first_name")\n    String firstName,' in code
        assert '    @JsonProperty("lastName")' not in code

    def test_gson_and_moshi(self) -> None:
        gson = java({"a_b": 1}, serialization_library=JavaSerializationLibrary.GSON)
        moshi = java({"a_b": 1}, serialization_library=JavaSerializationLibrary.MOSHI)

        assert '    @SerializedName("a_b")' in gson
        assert '    @Json(name = "a_b")' in moshi

    def test_optional_wrapper(self) -> None:
        code = java({"age": 1}, use_optional=True, optional_properties=True)
        assert "import java.util.Optional;" in code
        assert "    Optional<Double> age\n" in code

    def test_validation_not_on_records(self) -> None:
        assert "@NotBlank" not in java({"name": "x"}, use_validation=True)


class TestPojo:
    def test_accessors_and_equals(self) -> None:
        code = java({"first_name": "a", "age": 1}, class_style=JavaClassStyle.POJO)

        assert "import java.util.Objects;" in code
        assert "    private String firstName;\n    private double age;\n" in code
        assert (
            "    public String getFirstName() {\n"
            "        return firstName;\n"
            "    }\n"
            "\n"
            "    public void setFirstName(String firstName) {\n"
            "        this.firstName = firstName;\n"
            "    }\n"
        ) in code
        assert (
            "        return Objects.equals(firstName, that.firstName) &&\n"
            "               Objects.equals(age, that.age);"
        ) in code
        assert "        return Objects.hash(firstName, age);" in code

    def test_without_equals(self) -> None:
        code = java({"a": 1}, class_style=JavaClassStyle.POJO, generate_equals=False)
        assert "equals" not in code
        assert "java.util.Objects" not in code

    def test_validation_annotations(self) -> None:
        code = java(
            {"name": "x", "tags": ["a"], "age": 1},
            class_style=JavaClassStyle.POJO,
            use_validation=True,
        )
        assert "import javax.validation.constraints.NotNull;" in code
        assert "    @NotBlank\n    private String name;" in code
        assert "    @NotNull\n    private List<String> tags;" in code
        assert "    private double age;" in code


class TestLombokAndImmutables:
    def test_lombok_class(self) -> None:
        code = java({"a": 1, "b": "x"}, class_style=JavaClassStyle.LOMBOK, generate_builder=True)

        assert "import lombok.Builder;" in code
        assert (
            "@Data\n@Builder\n@NoArgsConstructor\n@AllArgsConstructor\n"
            "public class Root {\n"
            "    private double a;\n"
            "\n"
            "    private String b;\n"
            "}"
        ) in code

    def test_immutables_interface(self) -> None:
        code = java({"a": 1}, class_style=JavaClassStyle.IMMUTABLES)

        assert "import org.immutables.value.Value;" in code
        assert "@Value.Immutable\npublic interface Root {\n    double a();\n}" in code

    def test_spring_preset(self, renamed_data) -> None:
        code = create_spring_generator().generate(renamed_data)

        assert "@Builder" in code
        assert '    @JsonProperty("is-active")\n    private boolean isActive;' in code
        assert '    @JsonProperty("first_name")\n    @NotBlank\n    private String firstName;' in code


class TestSymbolKeys:
    def test_jackson_renames(self, symbol_keys_data) -> None:
        code = java(symbol_keys_data, serialization_library=JavaSerializationLibrary.JACKSON)

        assert '    @JsonProperty("@type")\n    String type,' in code
        assert '    @JsonProperty("$schema")\n    String schema,' in code
        assert '    @JsonProperty("2fa")\n    boolean _2fa\n' in code

    def test_enum_options_from_strings(self, symbol_keys_data) -> None:
        options = JavaOptions(serialization_library="gson", class_style="pojo")

        assert options.serialization_library is JavaSerializationLibrary.GSON
        assert options.class_style is JavaClassStyle.POJO
        assert '@SerializedName("2fa")' in JavaGenerator().generate(symbol_keys_data, options)
